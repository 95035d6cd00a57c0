"""CLI output utilities and formatting."""

from colorama import Fore, Style

# ASCII art banner for Sprig CLI
BANNER = f"""
{Fore.GREEN}╔════════════════════════════════════════════════╗{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}                                                {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}s p r i g{Style.RESET_ALL}                                    {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}                                                {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}   {Fore.WHITE}{Style.BRIGHT}A small single-user version control system{Style.RESET_ALL}   {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}║{Style.RESET_ALL}                                                {Fore.GREEN}║{Style.RESET_ALL}
{Fore.GREEN}╚════════════════════════════════════════════════╝{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def format_log_entry(commit_hash: str, commit) -> str:
    """
    Format one commit for log and global-log.

    ===
    commit <hash>
    Merge: <parent[:7]> <merge-parent[:7]>    (merge commits only)
    Date: <timestamp>
    <message>
    <blank line>
    """
    lines = ['===', f'commit {commit_hash}']
    if commit.is_merge:
        lines.append(f'Merge: {commit.parent[:7]} {commit.merge_parent[:7]}')
    lines.append(f'Date: {commit.timestamp}')
    lines.append(commit.message)
    lines.append('')
    return '\n'.join(lines)


def format_status(status) -> str:
    """Render a Status in the fixed section layout."""
    lines = ['=== Branches ===']
    for branch in status.branches:
        prefix = '*' if branch == status.current_branch else ''
        lines.append(f'{prefix}{branch}')

    sections = [
        ('=== Staged Files ===', status.staged),
        ('=== Removed Files ===', status.removed),
        ('=== Modifications Not Staged For Commit ===', status.modified),
        ('=== Untracked Files ===', status.untracked),
    ]
    for header, entries in sections:
        lines.append('')
        lines.append(header)
        lines.extend(sorted(entries))

    lines.append('')
    return '\n'.join(lines)
