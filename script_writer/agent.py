import json
from typing import Dict, Any, List

from pydantic import ValidationError

from script_writer.prompt import (
    SCRIPT_INSTRUCT,
    SCRIPT_PROMPT,
    FIRST_PART_CONTEXT,
    FIRST_PART_INSTRUCTION,
    NEXT_PART_CONTEXT,
    NEXT_PART_INSTRUCTION,
)
from script_writer.state import ScriptState
from script_writer.model import ScriptContinuation
from script_writer.model_manager import ModelManager, GenerationError
from script_writer.config_loader import BaseConfig
from script_writer.tool import extract_json
from script_writer.log_config import loggers

logger = loggers['agent']


# 写作代理 - 每次调用续写脚本的下一段
class ScriptWriterAgent:
    def __init__(self, model_manager: ModelManager, config: BaseConfig):
        self.model_manager = model_manager
        self.config = config

    def build_messages(self, state: ScriptState) -> List[Dict[str, Any]]:
        first = state.is_first_iteration
        user_message = SCRIPT_PROMPT.format(
            part="first part" if first else "next part",
            topic=state.topic,
            word_count=state.word_count,
            max_words=state.max_words,
            word_remaining=state.word_remaining,
            context=FIRST_PART_CONTEXT if first else NEXT_PART_CONTEXT.format(summary=state.summary.strip()),
            instruction=FIRST_PART_INSTRUCTION if first else NEXT_PART_INSTRUCTION,
        )
        return [
            {"role": "system", "content": SCRIPT_INSTRUCT},
            {"role": "user", "content": user_message}
        ]

    def write_continuation(self, state: ScriptState) -> ScriptContinuation:
        """请求下一段续写并解析为结构化回复, 失败时抛出 GenerationError"""
        messages = self.build_messages(state)
        logger.debug(f"WriterAgent 输入: {messages}")

        response = self.model_manager.generate(messages, self.config)
        logger.debug(f"WriterAgent 输出: {response}")

        return self.parse_response(response)

    @staticmethod
    def parse_response(response: str) -> ScriptContinuation:
        extracted = extract_json(response)
        if extracted is None:
            raise GenerationError("回复中找不到JSON对象")
        try:
            return ScriptContinuation(**json.loads(extracted))
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            raise GenerationError(f"回复格式验证失败: {str(e)}") from e
