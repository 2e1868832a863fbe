"""
Integration tests for the apply command.
"""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from lvmstate.cli.cli import app
from lvmstate.services.volume_group import ConvergenceResult


def _write(temp_dir, data):
    path = temp_dir / "volumes.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestApply:
    """Tests for apply command."""

    @pytest.mark.integration
    @patch("lvmstate.cli.commands.apply.SystemGateway")
    @patch("lvmstate.cli.commands.apply.VolumeGroupConvergence")
    def test_apply_each_group_in_order(self, mock_convergence, mock_gateway, temp_dir):
        path = _write(
            temp_dir,
            {
                "volume_groups": [
                    {"name": "data_vg", "physical_volumes": ["/dev/sdb"]},
                    {"name": "scratch_vg", "physical_volumes": ["/dev/sdc"]},
                ]
            },
        )
        mock_convergence.return_value.converge.side_effect = [
            ConvergenceResult(name="data_vg", changed=True),
            ConvergenceResult(name="scratch_vg"),
        ]

        runner = CliRunner()
        result = runner.invoke(app, ["apply", str(path)])

        assert result.exit_code == 0
        assert "data_vg: changed" in result.stdout
        assert "scratch_vg: unchanged" in result.stdout
        assert "Applied 2 volume group(s)" in result.stdout
        names = [call[0][0].name for call in mock_convergence.return_value.converge.call_args_list]
        assert names == ["data_vg", "scratch_vg"]

    @pytest.mark.integration
    @patch("lvmstate.cli.commands.apply.SystemGateway")
    @patch("lvmstate.cli.commands.apply.VolumeGroupConvergence")
    def test_apply_nothing_to_do(self, mock_convergence, mock_gateway, temp_dir):
        path = _write(temp_dir, {"name": "data_vg", "physical_volumes": ["/dev/sdb"]})
        mock_convergence.return_value.converge.return_value = ConvergenceResult(name="data_vg")

        runner = CliRunner()
        result = runner.invoke(app, ["apply", str(path)])

        assert result.exit_code == 0
        assert "Applied 1 volume group(s), nothing to do" in result.stdout

    @pytest.mark.integration
    def test_apply_invalid_declaration(self, temp_dir):
        path = _write(temp_dir, {"name": "data_vg", "physical_volumes": []})

        runner = CliRunner()
        result = runner.invoke(app, ["apply", str(path)])

        assert result.exit_code == 1
        assert "Error applying" in result.output

    @pytest.mark.integration
    def test_apply_missing_file(self, temp_dir):
        runner = CliRunner()
        result = runner.invoke(app, ["apply", str(temp_dir / "missing.json")])

        assert result.exit_code != 0
