"""Config command - manage repository configuration."""

import click
from sprig.core.config import get_config, split_key
from sprig.core.repository import Repository
from sprig.errors import RepositoryNotFound
from sprig.cli.output import success, error, info


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.

    Examples:
        sprig config set merge.stageconflicts true
        sprig config set --global core.defaultbranch main
    """
    repo = Repository.find_repository()
    if not repo and not is_global:
        raise RepositoryNotFound()

    section, option = split_key(key)
    get_config(repo).set(section, option, value, global_config=is_global)

    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"), err=True)


@config_cmd.command('get')
@click.argument('key')
@click.pass_context
def config_get(ctx, key):
    """
    Get a config value.

    Environment variables (SPRIG_<SECTION>_<KEY>) override the repository
    config, which overrides the global config. Known keys fall back to
    their built-in default.

    Examples:
        sprig config get core.defaultbranch
    """
    section, option = split_key(key)
    value = get_config(Repository.find_repository()).get(section, option)

    if value is None:
        click.echo(error(f"Config key not found: {key}"), err=True)
        ctx.exit(1)

    click.echo(value)


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.

    Examples:
        sprig config list
        sprig config list --global
    """
    entries = get_config(Repository.find_repository()).entries(global_only=is_global)

    if not entries:
        click.echo(info("No configuration set"), err=True)
        return

    for key, value, scope in entries:
        suffix = " (global)" if scope == "global" and not is_global else ""
        click.echo(f"{key}={value}{suffix}")
