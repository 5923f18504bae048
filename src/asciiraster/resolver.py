from pathlib import Path
from typing import Callable

from asciiraster.errors import InputNotFoundError

PROMPT_MESSAGE = "\nPlease drag and drop your image file into the terminal, or paste its full path:"


def _read_from_terminal() -> str:
    print(PROMPT_MESSAGE)
    try:
        return input("Image path: ")
    except EOFError:
        return ""


def _clean(answer: str) -> str:
    """Strip whitespace and the quotes terminals add around dropped paths."""
    return answer.strip().strip("\"'").strip()


def resolve_input(
    candidate: str | Path,
    exists: Callable[[Path], bool] | None = None,
    read_line: Callable[[], str] | None = None,
) -> Path:
    """Return a path to an existing image file, asking for one if candidate is missing."""
    if exists is None:
        exists = Path.is_file
    if read_line is None:
        read_line = _read_from_terminal

    path = Path(candidate)
    if exists(path):
        return path

    answer = _clean(read_line())
    path = Path(answer)
    if not answer or not exists(path):
        raise InputNotFoundError(f"Image file not found at '{answer}'")
    return path
