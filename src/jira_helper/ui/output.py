"""Terminal output helpers with colors and hyperlinks."""

# Colors
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
CYAN = "\033[0;36m"
GRAY = "\033[90m"
MAGENTA = "\033[0;35m"
BOLD = "\033[1m"
NC = "\033[0m"


def hyperlink(url: str, text: str) -> str:
    """OSC 8 hyperlink - clickable in modern terminals."""
    return f"\033]8;;{url}\007{text}\033]8;;\007"


def dim(text: str) -> str:
    return f"{GRAY}{text}{NC}"


def bold(text: str) -> str:
    return f"{BOLD}{text}{NC}"


def log(msg: str) -> None:
    print(f"\r\033[K{BLUE}[jira]{NC} {msg}")


def success(msg: str) -> None:
    print(f"\r\033[K{GREEN}[jira]{NC} {msg}")


def warn(msg: str) -> None:
    print(f"\r\033[K{YELLOW}[jira]{NC} {msg}")


def error(msg: str) -> None:
    print(f"\r\033[K{RED}[jira]{NC} {msg}")


def rule(width: int = 80) -> None:
    """Print a dim horizontal separator."""
    print(dim("-" * width))
