"""Integration tests for init and command dispatch."""

from sprig.cli.main import cli
from sprig.core.objects import Commit


class TestInitCommand:
    """Tests for sprig init."""

    def test_init_creates_repository(self, runner, cli_dir):
        result = runner.invoke(cli, ['init'])

        assert result.exit_code == 0
        assert (cli_dir / '.sprig').is_dir()
        assert (cli_dir / '.sprig' / Commit.root().hash).is_file()

    def test_init_twice(self, runner, cli_dir):
        runner.invoke(cli, ['init'])
        result = runner.invoke(cli, ['init'])

        assert result.exit_code == 0
        assert 'A Sprig version-control system already exists in the current directory.' in result.output

    def test_init_rejects_operands(self, runner, cli_dir):
        result = runner.invoke(cli, ['init', 'extra'])

        assert result.output.strip() == 'Incorrect operands.'
        assert not (cli_dir / '.sprig').exists()


class TestDispatch:
    """Tests for errors raised before any command runs."""

    def test_no_command(self, runner, cli_dir):
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert result.output.strip() == 'Please enter a command.'

    def test_unknown_command(self, runner, cli_dir):
        result = runner.invoke(cli, ['frobnicate'])

        assert result.exit_code == 0
        assert result.output.strip() == 'No command with that name exists.'

    def test_commands_need_a_repository(self, runner, cli_dir):
        for args in (['add', 'a.txt'], ['commit', 'msg'], ['log'], ['status'],
                     ['checkout', 'master'], ['branch', 'b'], ['merge', 'b']):
            result = runner.invoke(cli, args)
            assert result.exit_code == 0
            assert result.output.strip() == 'Not in an initialized Sprig directory.'

    def test_commands_work_from_subdirectory(self, runner, cli_dir, monkeypatch):
        runner.invoke(cli, ['init'])
        nested = cli_dir / 'src'
        nested.mkdir()
        (nested / 'mod.txt').write_text('code')
        monkeypatch.chdir(nested)

        runner.invoke(cli, ['add', 'mod.txt'])
        result = runner.invoke(cli, ['status'])

        assert '=== Staged Files ===\nsrc/mod.txt\n' in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output
