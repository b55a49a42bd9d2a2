from __future__ import annotations

from typing import Any, Optional

import requests

from .config import FrappeConfig
from .constants import GETDOC_METHOD, REPORTVIEW_METHOD, WORKFLOW_DOCTYPE
from .io import parse_workflow_catalog, parse_workflow_document
from .model import WorkflowDocument


class FrappeClient:
    """Minimal client for the two Frappe desk methods the tool needs.

    No retries and no caching: each call is one blocking request that either
    succeeds or raises.
    """

    def __init__(self, config: FrappeConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        self.session.headers["Authorization"] = config.authorization

    def __enter__(self) -> "FrappeClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self.config.base_url}{path}"
        resp = self.session.request(method, url, timeout=self.config.timeout, **kwargs)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(
                f"{method} {path}: expected a JSON object, got {type(data).__name__}"
            )
        return data

    def list_workflows(self) -> list[str]:
        """Return the names of all Workflow records on the site."""
        # (None, value) makes requests send a plain multipart form field.
        data = self._request(
            "POST",
            REPORTVIEW_METHOD,
            files={"doctype": (None, WORKFLOW_DOCTYPE)},
        )
        return parse_workflow_catalog(data)

    def get_workflow(self, name: str) -> WorkflowDocument:
        data = self._request(
            "GET",
            GETDOC_METHOD,
            params={"doctype": WORKFLOW_DOCTYPE, "name": name},
            headers={"Accept": "*/*"},
        )
        return parse_workflow_document(data)
