"""Tests for ToolRegistry."""

from typing import Sequence

from django.test import TestCase

from tool_runtime.service.errors import ToolConfigurationError, ToolNotFound
from tool_runtime.tools.builtins import CalcSquareRoot, TestTool
from tool_runtime.tools.interfaces import Tool
from tool_runtime.tools.registry import ToolRegistry, get_tool_registry
from tool_runtime.types.arguments import ArgumentLike
from tool_runtime.types.outputs import ToolOutput


class ToolRegistryTests(TestCase):
    """Test ToolRegistry register_tool, get_tool, list_tools, freeze."""

    def setUp(self):
        super().setUp()
        self.registry = ToolRegistry()

    def test_register_tool_and_get_tool(self):
        tool = CalcSquareRoot()
        self.registry.register_tool(tool)
        self.assertIs(self.registry.get_tool("calculate_square_root"), tool)
        self.assertIn("calculate_square_root", self.registry)
        self.assertEqual(len(self.registry), 1)

    def test_get_tool_unknown_raises_tool_not_found(self):
        self.registry.register_tool(TestTool())
        with self.assertRaises(ToolNotFound) as ctx:
            self.registry.get_tool("nonexistent")
        self.assertIn("nonexistent", str(ctx.exception))
        self.assertIn("test_tool", str(ctx.exception))
        self.assertEqual(ctx.exception.code, "toolNotFound")

    def test_register_tool_empty_name_raises(self):
        class EmptyNameTool(Tool):
            async def call(self, arguments: Sequence[ArgumentLike]) -> ToolOutput:
                return ToolOutput(string="")

        with self.assertRaises(ValueError) as ctx:
            self.registry.register_tool(EmptyNameTool())
        self.assertIn("non-empty", str(ctx.exception))

    def test_register_duplicate_name_raises(self):
        self.registry.register_tool(TestTool())
        with self.assertRaises(ToolConfigurationError) as ctx:
            self.registry.register_tool(TestTool())
        self.assertIn("already registered", str(ctx.exception))

    def test_register_after_freeze_raises(self):
        self.registry.register_tool(TestTool())
        self.registry.freeze()
        self.assertTrue(self.registry.frozen)
        with self.assertRaises(ToolConfigurationError) as ctx:
            self.registry.register_tool(CalcSquareRoot())
        self.assertIn("frozen", str(ctx.exception))
        self.assertNotIn("calculate_square_root", self.registry)

    def test_lookup_still_works_after_freeze(self):
        tool = TestTool()
        self.registry.register_tool(tool)
        self.registry.freeze()
        self.assertIs(self.registry.get_tool("test_tool"), tool)

    def test_list_tools_returns_copy(self):
        tool = TestTool()
        self.registry.register_tool(tool)
        listed = self.registry.list_tools()
        self.assertEqual(listed, {"test_tool": tool})
        listed["test_tool"] = None
        self.assertIs(self.registry.get_tool("test_tool"), tool)

    def test_list_definitions_sorted_by_name(self):
        self.registry.register_tool(TestTool())
        self.registry.register_tool(CalcSquareRoot())
        names = [d.name for d in self.registry.list_definitions()]
        self.assertEqual(names, ["calculate_square_root", "test_tool"])

    def test_get_definition(self):
        self.registry.register_tool(CalcSquareRoot())
        self.assertEqual(
            self.registry.get_definition("calculate_square_root"), CalcSquareRoot.definition
        )
        with self.assertRaises(ToolNotFound):
            self.registry.get_definition("missing")

    async def test_invoke_routes_by_name(self):
        self.registry.register_tool(TestTool())
        self.registry.register_tool(CalcSquareRoot())
        result = await self.registry.invoke(
            "calculate_square_root", [CalcSquareRoot.InputArgument(number=9.0)]
        )
        self.assertEqual(result, ToolOutput(double=3.0))
        self.assertEqual(await self.registry.invoke("test_tool", []), ToolOutput(string="test result"))

    async def test_invoke_unknown_raises_tool_not_found(self):
        with self.assertRaises(ToolNotFound):
            await self.registry.invoke("nonexistent", [])

    def test_get_tool_registry_returns_singleton(self):
        a = get_tool_registry()
        b = get_tool_registry()
        self.assertIs(a, b)

    def test_builtins_registered_on_startup(self):
        registry = get_tool_registry()
        self.assertIn("test_tool", registry)
        self.assertIn("calculate_square_root", registry)
