import logging
import threading
from typing import Callable, Dict

logger = logging.getLogger(__name__)


class PageCache:
    """Rendered HTML keyed by request path.

    Pages stay cached until a mutation calls revalidate_path for them. Each
    revalidation bumps the path's generation; a render that started before
    the bump is returned to its caller but not stored.
    """

    def __init__(self):
        self._pages: Dict[str, str] = {}
        self._generations: Dict[str, int] = {}
        self._epoch = 0
        self._lock = threading.Lock()

    def get_or_render(self, path: str, render: Callable[[], str]) -> str:
        with self._lock:
            page = self._pages.get(path)
            generation = (self._epoch, self._generations.get(path, 0))
        if page is not None:
            return page
        page = render()
        with self._lock:
            if (self._epoch, self._generations.get(path, 0)) == generation:
                self._pages[path] = page
            else:
                logger.debug("discarded stale render of %s", path)
        return page

    def revalidate_path(self, path: str) -> None:
        with self._lock:
            self._pages.pop(path, None)
            self._generations[path] = self._generations.get(path, 0) + 1
        logger.debug("revalidated %s", path)

    def is_cached(self, path: str) -> bool:
        with self._lock:
            return path in self._pages

    def clear(self) -> None:
        with self._lock:
            self._epoch += 1
            self._pages.clear()


page_cache = PageCache()


def get_page_cache() -> PageCache:
    return page_cache
