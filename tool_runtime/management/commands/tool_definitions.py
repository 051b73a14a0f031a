"""
Print the definitions of registered tools as JSON.

Usage:
    python manage.py tool_definitions
    python manage.py tool_definitions --tool calculate_square_root
    python manage.py tool_definitions --format functions
"""
from __future__ import annotations

import json

from django.core.management.base import BaseCommand, CommandError

from tool_runtime.service.errors import ToolNotFound
from tool_runtime.tools.registry import get_tool_registry
from tool_runtime.tools.schema import definitions_to_function_schemas


class Command(BaseCommand):
    help = "Print registered tool definitions for discovery by external callers."

    def add_arguments(self, parser):
        parser.add_argument(
            "--tool",
            default=None,
            help="Only print the definition of this tool.",
        )
        parser.add_argument(
            "--format",
            choices=["json", "functions"],
            default="json",
            help="'json' for ToolDefinition objects, 'functions' for function-calling schemas (default: json).",
        )

    def handle(self, *args, **options):
        registry = get_tool_registry()
        if options["tool"]:
            try:
                definitions = [registry.get_definition(options["tool"])]
            except ToolNotFound as exc:
                raise CommandError(str(exc)) from exc
        else:
            definitions = registry.list_definitions()

        if options["format"] == "functions":
            payload = definitions_to_function_schemas(definitions)
        else:
            payload = [d.model_dump(mode="json", by_alias=True) for d in definitions]

        self.stdout.write(json.dumps(payload, indent=2))
