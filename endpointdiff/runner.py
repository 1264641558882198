"""Runner that fetches both configured endpoints and compares them."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Optional

from .client import JSONClient
from .config import DiffConfig, EndpointSpec, load_config
from .engine import ComparisonEngine
from .exceptions import FetchError
from .models import ComparisonResult, Side

logger = logging.getLogger(__name__)


class EndpointDiffRunner:
    """
    Fetches the two endpoints of a DiffConfig and compares their values.

    Usage:
        with EndpointDiffRunner.from_file("config.yaml") as runner:
            result = runner.run()

    Or as a one-liner:
        result = EndpointDiffRunner.run_config("config.yaml")
    """

    def __init__(
        self,
        config: DiffConfig,
        client: Optional[JSONClient] = None,
        engine: Optional[ComparisonEngine] = None
    ):
        self.config = config
        self.engine = engine or ComparisonEngine()

        # A supplied client is shared by both sides and left open; otherwise
        # each side gets its own session, closed by close()
        self._owns_clients = client is None
        if client is None:
            self.clients = {
                side: JSONClient(timeout=config.general.timeout) for side in Side
            }
        else:
            self.clients = {side: client for side in Side}

    def __enter__(self) -> "EndpointDiffRunner":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        if self._owns_clients:
            for client in self.clients.values():
                client.close()

    @classmethod
    def from_file(cls, config_path: str | Path) -> "EndpointDiffRunner":
        return cls(load_config(config_path))

    def run(self) -> ComparisonResult:
        """
        Fetch both endpoints and compare the values selected by their paths.

        Raises:
            FetchError: an endpoint could not be fetched
            PathEvaluationError: a path failed on the fetched document
        """
        left_data, right_data = self.fetch_all()

        result = self.engine.compare(
            left_data,
            self.config.endpoint1.jsonpath,
            right_data,
            self.config.endpoint2.jsonpath,
            left_source=self.config.endpoint1.url,
            right_source=self.config.endpoint2.url,
        )

        logger.info(
            "Compared %s and %s: %d matched, %d only in endpoint1, %d only in endpoint2",
            result.left_source,
            result.right_source,
            len(result.matched),
            len(result.only_in_left),
            len(result.only_in_right),
        )
        return result

    def fetch_all(self) -> tuple[Any, Any]:
        """Fetch both endpoints, concurrently when configured to."""
        endpoints = (
            (self.config.endpoint1, Side.LEFT),
            (self.config.endpoint2, Side.RIGHT),
        )

        if not self.config.general.parallel:
            return tuple(self._fetch(spec, side) for spec, side in endpoints)

        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [executor.submit(self._fetch, spec, side) for spec, side in endpoints]
            return tuple(future.result() for future in futures)

    def _fetch(self, spec: EndpointSpec, side: Side) -> Any:
        headers = spec.merged_headers(self.config.general)
        try:
            return self.clients[side].fetch_json(spec.url, headers)
        except FetchError as e:
            raise FetchError(e.url, e.message, e.status_code, side=side.value) from e

    @classmethod
    def run_config(cls, config_path: str | Path) -> ComparisonResult:
        """
        Convenience class method to load a config file and run it.

        Example:
            result = EndpointDiffRunner.run_config("config.yaml")
        """
        with cls.from_file(config_path) as runner:
            return runner.run()


def run_comparison(config_path: str | Path) -> ComparisonResult:
    """
    Run the comparison described by a config file.

    This is the simplest way to run a comparison:

        from endpointdiff import run_comparison
        result = run_comparison("config.yaml")
    """
    return EndpointDiffRunner.run_config(config_path)
