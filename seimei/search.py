"""Evaluation and filtering of generated candidates."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from typing import Iterable, Iterator

from seimei import mora
from seimei.evaluation import evaluate
from seimei.filters import FilterFunc, Target
from seimei.gen import Generated
from seimei.sex import SexFunc
from seimei.strokes import StrokesFunc, sum_strokes

_DONE = object()


@dataclass(frozen=True)
class _Failure:
    error: Exception


def _to_target(
    family_name: str,
    generated: Generated,
    strokes_func: StrokesFunc,
    sex_func: SexFunc,
) -> Target:
    return Target(
        kanji=generated.given_name,
        yomi=generated.yomi,
        strokes=sum_strokes(generated.given_name, strokes_func),
        mora=mora.count(generated.yomi),
        sex=sex_func(generated.yomi),
        eval_result=evaluate(family_name, generated.given_name, strokes_func),
    )


def search(
    family_name: str,
    candidates: Iterable[Generated],
    filter_func: FilterFunc,
    strokes_func: StrokesFunc,
    sex_func: SexFunc,
) -> Iterator[Target]:
    """Yield the evaluated candidates that the filter accepts."""
    for generated in candidates:
        target = _to_target(family_name, generated, strokes_func, sex_func)
        if filter_func(target):
            yield target


def parallel(
    family_name: str,
    candidates: Iterable[Generated],
    filter_func: FilterFunc,
    strokes_func: StrokesFunc,
    sex_func: SexFunc,
    parallelism: int,
) -> Iterator[Target]:
    """Like :func:`search`, with ``parallelism`` worker threads; output order is not kept."""
    if parallelism < 1:
        raise ValueError("parallelism must be greater than or equal to 1")

    source = iter(candidates)
    lock = threading.Lock()
    results: queue.Queue[object] = queue.Queue()
    stop = threading.Event()

    def take() -> object:
        with lock:
            return next(source, _DONE)

    def worker() -> None:
        try:
            while not stop.is_set():
                item = take()
                if item is _DONE:
                    break
                target = _to_target(family_name, item, strokes_func, sex_func)
                if filter_func(target):
                    results.put(target)
        except Exception as exc:
            results.put(_Failure(exc))
        finally:
            results.put(_DONE)

    threads = [threading.Thread(target=worker, daemon=True) for _ in range(parallelism)]
    for thread in threads:
        thread.start()

    error: Exception | None = None
    finished = 0
    try:
        while finished < parallelism:
            item = results.get()
            if item is _DONE:
                finished += 1
            elif isinstance(item, _Failure):
                if error is None:
                    error = item.error
                    stop.set()
            elif error is None:
                yield item
    finally:
        stop.set()
        for thread in threads:
            thread.join()
    if error is not None:
        raise error