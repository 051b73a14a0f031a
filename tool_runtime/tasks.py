from typing import Any, Dict, List, Optional

from celery import shared_task

from tool_runtime.service.tool_service import get_tool_service
from tool_runtime.types.arguments import Argument
from tool_runtime.types.context import RunContext


@shared_task(time_limit=600, soft_time_limit=540)
def run_tool_task(
    tool_name: str,
    arguments: List[Dict[str, Any]],
    run_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Invoke a tool from wire-format arguments and return the output wire dict.

    No autoretry: a malformed call fails the same way every time.
    """
    bags = [Argument.model_validate(raw) for raw in arguments]
    output = get_tool_service().run(tool_name, bags, RunContext.create(run_id=run_id))
    return output.model_dump(mode="json")
