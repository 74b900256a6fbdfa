# topmark:header:start
#
#   project      : WasmDocs
#   file         : __init__.py
#   file_relpath : src/wasmdocs/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The WasmDocs Authors
#
# topmark:header:end

"""Documentation build pipeline.

A run is planned as an ordered tuple of `Step` objects (the upstream build
step followed by one generator step per selected surface) and executed
sequentially with fail-fast semantics.
"""

from __future__ import annotations

from wasmdocs.pipeline.planner import make_plan
from wasmdocs.pipeline.runner import RunReport, StepFailedError, run_plan
from wasmdocs.pipeline.steps import Step

__all__: list[str] = [
    "RunReport",
    "Step",
    "StepFailedError",
    "make_plan",
    "run_plan",
]
