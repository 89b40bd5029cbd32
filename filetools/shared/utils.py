"""
filetools.shared.utils

Progress reporting shared by the bulk directory helpers.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from tqdm import tqdm


class Progress:
    """
    Simple wrapper for tqdm progress bars that automatically closes
    on completion or interruption.
    """

    def __init__(
        self,
        iterable: Iterable[Any],
        desc: str = "Processing",
        total: Optional[int] = None,
        disable: bool = False,
    ):
        self._tqdm = tqdm(
            iterable,
            desc=desc,
            total=total,
            leave=False,
            dynamic_ncols=True,
            disable=disable,
        )

    def __iter__(self) -> Iterator[Any]:
        try:
            for item in self._tqdm:
                yield item
        finally:
            self._tqdm.close()
