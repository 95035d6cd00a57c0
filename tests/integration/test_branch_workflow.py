"""Integration tests for branch, checkout and reset."""

from sprig.core.repository import Repository


def current_hash(cli_dir):
    return Repository(str(cli_dir)).refs.current_commit_hash()


def commit_file(sprig, cli_dir, path, content, message):
    (cli_dir / path).write_text(content)
    sprig('add', path)
    sprig('commit', message)
    return current_hash(cli_dir)


class TestBranchCommands:

    def test_branch_and_rm_branch(self, sprig):
        sprig('branch', 'feature')
        assert '*master\nfeature\n' in sprig('status').output

        assert sprig('branch', 'feature').output.strip() == 'A branch with that name already exists.'

        sprig('rm-branch', 'feature')
        assert 'feature' not in sprig('status').output

    def test_rm_branch_errors(self, sprig):
        assert sprig('rm-branch', 'ghost').output.strip() == 'A branch with that name does not exist.'
        assert sprig('rm-branch', 'master').output.strip() == 'Cannot remove the current branch.'
        assert sprig('rm-branch').output.strip() == 'Incorrect operands.'


class TestCheckoutCommand:

    def test_checkout_file_from_head(self, sprig, cli_dir):
        commit_file(sprig, cli_dir, 'a.txt', 'committed', 'add a')
        (cli_dir / 'a.txt').write_text('scribbles')

        result = sprig('checkout', '--', 'a.txt')

        assert result.exit_code == 0
        assert (cli_dir / 'a.txt').read_text() == 'committed'

    def test_checkout_file_from_commit_prefix(self, sprig, cli_dir):
        first = commit_file(sprig, cli_dir, 'a.txt', 'v1', 'v1')
        commit_file(sprig, cli_dir, 'a.txt', 'v2', 'v2')

        sprig('checkout', first[:6], '--', 'a.txt')

        assert (cli_dir / 'a.txt').read_text() == 'v1'
        assert current_hash(cli_dir) != first

    def test_checkout_file_errors(self, sprig, cli_dir):
        commit_file(sprig, cli_dir, 'a.txt', 'a', 'add a')

        assert sprig('checkout', '--', 'b.txt').output.strip() == 'File does not exist in that commit.'
        assert sprig('checkout', 'f' * 40, '--', 'a.txt').output.strip() == 'No commit with that id exists.'

    def test_checkout_bad_operands(self, sprig):
        for args in (['checkout'], ['checkout', '--'], ['checkout', 'a', 'b'],
                     ['checkout', 'abcdef', '++', 'a.txt'], ['checkout', '--', 'a', 'b']):
            assert sprig(*args).output.strip() == 'Incorrect operands.'

    def test_checkout_branch(self, sprig, cli_dir):
        commit_file(sprig, cli_dir, 'a.txt', 'a', 'add a')
        sprig('branch', 'feature')
        sprig('checkout', 'feature')
        commit_file(sprig, cli_dir, 'b.txt', 'b', 'add b')

        sprig('checkout', 'master')

        assert not (cli_dir / 'b.txt').exists()
        assert '*master\nfeature\n' in sprig('status').output

    def test_checkout_branch_errors(self, sprig, cli_dir):
        assert sprig('checkout', 'ghost').output.strip() == 'No such branch exists.'
        assert sprig('checkout', 'master').output.strip() == 'No need to checkout the current branch.'

        sprig('branch', 'feature')
        sprig('checkout', 'feature')
        commit_file(sprig, cli_dir, 'a.txt', 'feature', 'add a on feature')
        sprig('checkout', 'master')
        (cli_dir / 'a.txt').write_text('untracked')

        result = sprig('checkout', 'feature')

        assert 'There is an untracked file in the way; delete it, or add and commit it first.' in result.output
        assert (cli_dir / 'a.txt').read_text() == 'untracked'

    def test_checkout_branch_warns_about_deleted_files(self, sprig, cli_dir):
        sprig('branch', 'feature')
        (cli_dir / 'scratch.txt').write_text('scratch')

        result = sprig('checkout', 'feature')

        assert not (cli_dir / 'scratch.txt').exists()
        assert 'scratch.txt' in result.output


class TestResetCommand:

    def test_reset(self, sprig, cli_dir):
        first = commit_file(sprig, cli_dir, 'a.txt', 'v1', 'v1')
        commit_file(sprig, cli_dir, 'b.txt', 'b', 'add b')

        sprig('reset', first)

        assert current_hash(cli_dir) == first
        assert not (cli_dir / 'b.txt').exists()
        assert (cli_dir / 'a.txt').read_text() == 'v1'

    def test_reset_errors(self, sprig):
        assert sprig('reset', '0' * 40).output.strip() == 'No commit with that id exists.'
        assert sprig('reset').output.strip() == 'Incorrect operands.'
