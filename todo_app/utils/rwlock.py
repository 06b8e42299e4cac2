import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """
    Verrou lecteurs/rédacteur.

    - `read()` : partagé, autant de lecteurs simultanés que nécessaire.
    - `write()` : exclusif, bloque lecteurs et autres rédacteurs.
    - Un rédacteur en attente passe avant les nouveaux lecteurs (pas de famine).

    Toujours utilisé via `with`, donc relâché sur toutes les sorties, exceptions comprises.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    # ---------- lecture ----------

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    # ---------- écriture ----------

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
