"""Interactive prompts on stdin."""

import getpass
from dataclasses import dataclass
from typing import Callable

from jira_helper.ui.output import CYAN, GRAY, NC, YELLOW


def choose(prompt: str, options: list[str]) -> str:
    """Numbered menu. Re-asks until a valid number or exact option name is given."""
    if not options:
        raise ValueError("choose() needs at least one option")

    print(f"{CYAN}?{NC} {prompt}")
    for i, option in enumerate(options, 1):
        print(f"  {GRAY}{i:>2}){NC} {option}")

    while True:
        answer = input(f"  Select [1-{len(options)}]: ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        if answer in options:
            return answer
        print(f"  {YELLOW}Please enter a number between 1 and {len(options)}{NC}")


def prompt_text(prompt: str) -> str:
    return input(f"{CYAN}?{NC} {prompt} ").strip()


def prompt_secret(prompt: str) -> str:
    return getpass.getpass(f"? {prompt} ").strip()


def confirm(prompt: str, default: bool = False) -> bool:
    hint = "[Y/n]" if default else "[y/N]"
    answer = input(f"{CYAN}?{NC} {prompt} {hint} ").strip().lower()
    if not answer:
        return default
    return answer in ("y", "yes")


@dataclass
class Chooser:
    """Prompt functions bundled so callers can swap in scripted answers."""

    choose: Callable[[str, list[str]], str] = choose
    prompt_text: Callable[[str], str] = prompt_text
