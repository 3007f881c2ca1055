# tests/unit/cli/test_manage.py
from click.testing import CliRunner

from arm_backend.cli.manage import cli


def test_setup_commands():
    runner = CliRunner()

    result = runner.invoke(cli, ["create-tables"])
    assert result.exit_code == 0, result.output
    assert "All tables created successfully!" in result.output

    result = runner.invoke(cli, ["seed"])
    assert result.exit_code == 0, result.output
    assert "leadership:" in result.output

    result = runner.invoke(cli, ["init-geography"])
    assert result.exit_code == 0, result.output
    assert "Created 8 regions, 22 cercles, 56 communes" in result.output

    result = runner.invoke(cli, ["init-geography"])
    assert result.exit_code == 1
    assert "Geographic data already initialized" in result.output
