"""Tests for BuiltinRegistry class."""

import pytest

from env_reader.tools.builtin import (
    SYSTEM_READ_ENV_VAR,
    BuiltinRegistry,
    ToolErrorType,
    register_builtin_tools,
    register_system_tools,
)
from env_reader.config import ToolLibraryConfig
from env_reader.tools.builtin.system import MappingEnvironment, ReadEnvVarTool


class TestBuiltinRegistry:
    """Test suite for BuiltinRegistry."""

    def test_registry_initialization(self):
        """Test registry starts empty."""
        registry = BuiltinRegistry()
        assert len(registry.list_all()) == 0

    def test_register_single_tool(self):
        """Test registering a single tool."""
        registry = BuiltinRegistry()
        tool = ReadEnvVarTool()
        registry.register(tool)
        assert registry.has("read_env_var")
        assert registry.get("read_env_var") is tool

    def test_register_duplicate_tool_raises_error(self):
        """Test registering duplicate tool raises ValueError."""
        registry = BuiltinRegistry()
        registry.register(ReadEnvVarTool())
        with pytest.raises(ValueError, match="already registered"):
            registry.register(ReadEnvVarTool())

    def test_get_nonexistent_tool_returns_none(self):
        """Test getting non-existent tool returns None."""
        registry = BuiltinRegistry()
        assert registry.get("nonexistent") is None

    def test_to_llm_list_format(self):
        """Test to_llm_list() returns OpenAI-compatible format."""
        registry = BuiltinRegistry()
        registry.register(ReadEnvVarTool())
        llm_list = registry.to_llm_list()
        assert len(llm_list) == 1
        assert llm_list[0]["type"] == "function"
        func_def = llm_list[0]["function"]
        assert func_def["name"] == "read_env_var"
        assert "masked" in func_def["description"]
        assert func_def["parameters"]["required"] == ["variableName"]

    def test_json_schema_validation(self):
        """Test all tool parameters are valid JSON Schema."""
        registry = register_builtin_tools()
        for tool_def in registry.to_llm_list():
            params = tool_def["function"]["parameters"]
            assert params.get("type") == "object"
            assert "properties" in params
            assert isinstance(params.get("required"), list)

    def test_register_system_tools(self):
        """Test system tool list."""
        names = [tool.name for tool in register_system_tools()]
        assert names == [SYSTEM_READ_ENV_VAR]

    def test_tool_name_constant_is_exported(self):
        """Test tool name constants are part of the public API."""
        import env_reader.tools.builtin as builtin

        assert "SYSTEM_READ_ENV_VAR" in builtin.__all__
        assert builtin.SYSTEM_READ_ENV_VAR == ReadEnvVarTool().name


class TestRegisterBuiltinTools:
    """Test registry construction from configuration."""

    def test_all_tools_by_default(self):
        """Test default config registers every tool."""
        registry = register_builtin_tools()
        assert {t.name for t in registry.list_all()} == {"read_env_var"}

    def test_enabled_tools_empty(self):
        """Test an empty enabled list registers nothing."""
        registry = register_builtin_tools(ToolLibraryConfig(enabled_tools=[]))
        assert registry.list_all() == []

    def test_enabled_tools_unknown(self):
        """Test unknown tool names are rejected."""
        with pytest.raises(ValueError, match="Unknown tools"):
            register_builtin_tools(ToolLibraryConfig(enabled_tools=["no_such_tool"]))

    def test_registries_are_independent(self):
        """Test each call returns its own populated registry."""
        first = register_builtin_tools()
        second = register_builtin_tools()
        assert first is not second
        assert first.has("read_env_var")
        assert first.get("read_env_var") is not second.get("read_env_var")

    def test_environment_is_passed_to_tools(self):
        """Test the environment source reaches the tool."""
        env = MappingEnvironment({"FOO": "bar"})
        registry = register_builtin_tools(environment=env)
        assert registry.get("read_env_var").environment is env


class TestRegistryExecute:
    """Test dispatch through the registry."""

    def test_execute_found(self, sample_registry):
        """Test successful dispatch."""
        result = sample_registry.execute("read_env_var", {"variableName": "DATABASE_USER"})
        assert result.llm_content == 'Environment variable "DATABASE_USER" has value: "admin"'
        assert result.error is None

    def test_execute_unknown_tool(self, sample_registry):
        """Test unknown tool yields an error result."""
        result = sample_registry.execute("nonexistent", {})
        assert result.error.type == ToolErrorType.TOOL_NOT_REGISTERED
        assert "Tool not found" in result.llm_content

    def test_execute_invalid_params_not_run(self, sample_registry):
        """Test invalid parameters are rejected before execution."""
        result = sample_registry.execute("read_env_var", {"variableName": "123invalid"})
        assert result.error.type == ToolErrorType.INVALID_TOOL_PARAMS
        assert "must start with a letter or underscore" in result.error.message
        assert "has value" not in result.llm_content

    def test_execute_missing_param(self, sample_registry):
        """Test missing required property is reported."""
        result = sample_registry.execute("read_env_var", {})
        assert result.error.type == ToolErrorType.INVALID_TOOL_PARAMS
        assert "variableName" in result.error.message

    @pytest.mark.asyncio
    async def test_execute_batch_empty(self):
        """Test execute_batch() with empty list."""
        registry = BuiltinRegistry()
        results = await registry.execute_batch([])
        assert results == []

    @pytest.mark.asyncio
    async def test_execute_batch_preserves_order(self, sample_registry):
        """Test execute_batch() returns results in call order."""
        results = await sample_registry.execute_batch(
            [
                ("read_env_var", {"variableName": "API_KEY_TEST_VAR"}),
                ("read_env_var", {"variableName": "UNSET_VARIABLE"}),
                ("nonexistent", {}),
                ("read_env_var", {"variableName": "DATABASE_USER"}),
            ]
        )
        assert len(results) == 4
        assert results[0].return_display.endswith('"' + "*" * 20 + '"')
        assert results[1].error.type == ToolErrorType.ENV_VAR_NOT_FOUND
        assert results[2].error.type == ToolErrorType.TOOL_NOT_REGISTERED
        assert results[3].error is None
