"""Tests for ToolService: routing, deadlines, logging and error propagation."""

import asyncio
import json
from typing import Sequence
from unittest.mock import patch

from django.test import TestCase, override_settings

from tool_runtime.models import ToolCallLog
from tool_runtime.service.errors import (
    InvalidArgumentType,
    NoArguments,
    ToolConfigurationError,
    ToolNotFound,
    ToolTimeoutError,
)
from tool_runtime.service.tool_service import ToolService, get_tool_service
from tool_runtime.tools.builtins import CalcSquareRoot, TestTool
from tool_runtime.tools.interfaces import Tool
from tool_runtime.tools.registry import ToolRegistry
from tool_runtime.types.arguments import ArgumentLike, EmptyArgument
from tool_runtime.types.context import RunContext
from tool_runtime.types.outputs import ToolOutput


class SlowTool(Tool):
    name = "slow_tool"
    description = "Sleeps longer than any test deadline"

    async def call(self, arguments: Sequence[ArgumentLike]) -> ToolOutput:
        await asyncio.sleep(5)
        return ToolOutput(string="too late")


class SelfTimingOutTool(Tool):
    name = "self_timing_out_tool"
    description = "Raises its own TimeoutError"

    async def call(self, arguments: Sequence[ArgumentLike]) -> ToolOutput:
        raise TimeoutError("upstream timed out")


def _make_service(*tools, timeout=None):
    registry = ToolRegistry()
    for tool in tools:
        registry.register_tool(tool)
    return ToolService(tool_registry=registry, timeout_fn=lambda: timeout), registry


@override_settings(TOOL_RUNTIME_LOG_CALLS=False)
class ToolServiceCallTests(TestCase):
    """Async call path without persistence."""

    async def test_call_returns_tool_output(self):
        service, _ = _make_service(TestTool(), CalcSquareRoot())
        result = await service.call("calculate_square_root", [CalcSquareRoot.InputArgument(number=100.0)])
        self.assertEqual(result, ToolOutput(double=10.0))

    async def test_zero_argument_tool(self):
        service, _ = _make_service(TestTool())
        self.assertEqual(await service.call("test_tool", []), ToolOutput(string="test result"))

    async def test_unknown_tool_raises_tool_not_found(self):
        service, _ = _make_service(TestTool())
        with self.assertRaises(ToolNotFound):
            await service.call("missing", [])

    async def test_decode_errors_propagate_unchanged(self):
        service, _ = _make_service(CalcSquareRoot())
        with self.assertRaises(NoArguments):
            await service.call("calculate_square_root", [])
        with self.assertRaises(InvalidArgumentType):
            await service.call("calculate_square_root", [EmptyArgument()])

    async def test_domain_error_propagates_unchanged(self):
        service, _ = _make_service(CalcSquareRoot())
        with self.assertRaises(ValueError) as ctx:
            await service.call("calculate_square_root", [CalcSquareRoot.InputArgument(number=-4.0)])
        self.assertIs(type(ctx.exception), ValueError)

    async def test_first_call_freezes_registry(self):
        service, registry = _make_service(TestTool())
        self.assertFalse(registry.frozen)
        await service.call("test_tool", [])
        self.assertTrue(registry.frozen)
        with self.assertRaises(ToolConfigurationError):
            registry.register_tool(CalcSquareRoot())

    async def test_configured_timeout_raises_tool_timeout_error(self):
        service, _ = _make_service(SlowTool(), timeout=0.05)
        with self.assertRaises(ToolTimeoutError) as ctx:
            await service.call("slow_tool", [])
        self.assertIn("slow_tool", str(ctx.exception))

    async def test_context_deadline_overrides_configured_timeout(self):
        service, _ = _make_service(SlowTool(), timeout=None)
        with self.assertRaises(ToolTimeoutError):
            await service.call("slow_tool", [], RunContext.create(deadline_seconds=0.05))

    async def test_tool_raised_timeout_without_deadline_is_not_rewrapped(self):
        service, _ = _make_service(SelfTimingOutTool())
        with self.assertRaises(TimeoutError) as ctx:
            await service.call("self_timing_out_tool", [])
        self.assertNotIsInstance(ctx.exception, ToolTimeoutError)

    async def test_tool_timeout_error_under_deadline_passes_through(self):
        service, _ = _make_service(SelfTimingOutTool(), timeout=5)
        with self.assertRaises(TimeoutError) as ctx:
            await service.call("self_timing_out_tool", [])
        self.assertNotIsInstance(ctx.exception, ToolTimeoutError)
        self.assertEqual(str(ctx.exception), "upstream timed out")

    async def test_concurrent_calls_run_independently(self):
        service, _ = _make_service(CalcSquareRoot())
        results = await asyncio.gather(*(
            service.call("calculate_square_root", [CalcSquareRoot.InputArgument(number=float(n * n))])
            for n in range(1, 6)
        ))
        self.assertEqual([r.value for r in results], [1.0, 2.0, 3.0, 4.0, 5.0])

    @override_settings(TOOL_RUNTIME_CALL_TIMEOUT=0.05)
    async def test_timeout_read_from_settings_by_default(self):
        registry = ToolRegistry()
        registry.register_tool(SlowTool())
        service = ToolService(tool_registry=registry)
        with self.assertRaises(ToolTimeoutError):
            await service.call("slow_tool", [])

    def test_get_tool_service_returns_singleton(self):
        self.assertIs(get_tool_service(), get_tool_service())


class ToolServiceLoggingTests(TestCase):
    """Sync bridge plus ToolCallLog persistence."""

    def test_run_logs_success(self):
        service, _ = _make_service(CalcSquareRoot())
        context = RunContext.create()
        result = service.run(
            "calculate_square_root", [CalcSquareRoot.InputArgument(number=9.0)], context
        )
        self.assertEqual(result, ToolOutput(double=3.0))

        log = ToolCallLog.objects.get(run_id=context.run_id)
        self.assertEqual(log.status, ToolCallLog.Status.SUCCESS)
        self.assertEqual(log.tool_name, "calculate_square_root")
        self.assertEqual(
            log.arguments, [{"type": "calculate_square_root.input", "value": {"number": 9.0}}]
        )
        self.assertEqual(json.loads(log.output), {"double": 3.0})
        self.assertIsNotNone(log.duration_ms)

    def test_run_logs_error_and_reraises(self):
        service, _ = _make_service(CalcSquareRoot())
        context = RunContext.create()
        with self.assertRaises(NoArguments):
            service.run("calculate_square_root", [], context)

        log = ToolCallLog.objects.get(run_id=context.run_id)
        self.assertEqual(log.status, ToolCallLog.Status.ERROR)
        self.assertEqual(log.error_type, "NoArguments")
        self.assertEqual(log.arguments, [])
        self.assertEqual(log.output, "")

    def test_unknown_tool_is_not_logged(self):
        service, _ = _make_service(TestTool())
        context = RunContext.create()
        with self.assertRaises(ToolNotFound):
            service.run("missing", [], context)
        self.assertFalse(ToolCallLog.objects.filter(run_id=context.run_id).exists())

    @override_settings(TOOL_RUNTIME_LOG_CALLS=False)
    def test_logging_disabled(self):
        service, _ = _make_service(TestTool())
        context = RunContext.create()
        service.run("test_tool", [], context)
        self.assertFalse(ToolCallLog.objects.exists())

    def test_log_failure_does_not_surface(self):
        service, _ = _make_service(TestTool())
        with patch("tool_runtime.models.ToolCallLog.objects.create", side_effect=RuntimeError("db down")):
            with self.assertLogs("tool_runtime.service.logger", level="ERROR"):
                result = service.run("test_tool", [])
        self.assertEqual(result, ToolOutput(string="test result"))
