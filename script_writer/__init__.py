"""
基于 LangGraph 的 YouTube 脚本迭代生成
"""
from script_writer.generator import (
    generate_script,
    generate_youtube_script,
    generate_script_with_options,
)
from script_writer.model import ScriptResult, ScriptMetadata

__all__ = [
    "generate_script",
    "generate_youtube_script",
    "generate_script_with_options",
    "ScriptResult",
    "ScriptMetadata",
]
