"""Functions that locate a MeCab dictionary directory."""

from __future__ import annotations

import os
import subprocess
from typing import Callable

DicDirFunc = Callable[[], str]


class DicDirError(RuntimeError):
    """Raised when the dictionary directory cannot be found."""


def fallback(first: DicDirFunc, second: DicDirFunc) -> DicDirFunc:
    """Use ``second`` when ``first`` fails."""

    def locate() -> str:
        try:
            return first()
        except Exception:
            return second()

    return locate


def by_constant(dic_dir: str, error: BaseException | None = None) -> DicDirFunc:
    """Always give ``dic_dir``, or raise ``error`` when one is given."""

    def locate() -> str:
        if error is not None:
            raise error
        return dic_dir

    return locate


def _below(search_base_dir: DicDirFunc, name: str) -> DicDirFunc:
    def locate() -> str:
        return os.path.normpath(os.path.join(search_base_dir(), name))

    return locate


def ipa(search_base_dir: DicDirFunc) -> DicDirFunc:
    """The IPA dictionary below the base directory."""
    return _below(search_base_dir, "ipadic")


def neologd(search_base_dir: DicDirFunc) -> DicDirFunc:
    """The NEologd dictionary below the base directory."""
    return _below(search_base_dir, "mecab-ipadic-neologd")


def by_mecab_config() -> DicDirFunc:
    """Ask ``mecab-config`` for the dictionary base directory."""

    def locate() -> str:
        try:
            completed = subprocess.run(
                ["mecab-config", "--dicdir"],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise DicDirError(f"starting mecab-config failed: {exc}\n") from exc
        if completed.returncode != 0:
            raise DicDirError(
                f"waiting mecab-config failed: exit status {completed.returncode}\n{completed.stderr}"
            )
        return completed.stdout.strip()

    return locate