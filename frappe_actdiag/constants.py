from __future__ import annotations

# Frappe REST methods used to list and load Workflow records.
WORKFLOW_DOCTYPE = "Workflow"
REPORTVIEW_METHOD = "/api/method/frappe.desk.reportview.get"
GETDOC_METHOD = "/api/method/frappe.desk.form.load.getdoc"

# Settings read from the env file (or the process environment).
ENV_BASE_URL = "FRAPPE_BASE_URL"
ENV_API_KEY = "FRAPPE_API_KEY"
ENV_API_SECRET = "FRAPPE_API_SECRET"
ENV_KROKI_URL = "KROKI_URL"

ENV_FILE_DEFAULT = ".env"

KROKI_URL_DEFAULT = "https://kroki.io"
DIAGRAM_TYPE = "actdiag"

# Image formats kroki serves for actdiag sources.
OUTPUT_FORMATS: tuple[str, ...] = ("svg", "png", "pdf")
OUTPUT_FORMAT_DEFAULT = "svg"

ZLIB_LEVEL = 9
