import logging
from importlib import import_module

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class ToolRuntimeConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "tool_runtime"
    verbose_name = "Tool Runtime"

    def ready(self) -> None:  # pragma: no cover - import side effects only
        from .conf import get_tool_modules

        # Import tool modules so they register with the process-wide registry.
        for module_path in ["tool_runtime.tools.builtins", *get_tool_modules()]:
            try:
                import_module(module_path)
            except Exception:
                logger.error(
                    "Failed to import tool module %s during startup. "
                    "Its tools will be unavailable until the issue is resolved.",
                    module_path,
                    exc_info=True,
                )
