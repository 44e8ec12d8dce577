import json
from typing import List, Optional

import pytest

from script_writer.config_loader import BaseConfig
from script_writer.model_manager import ModelManager, GenerationError


def make_reply(num_words: int, completed: bool = False, script_type: Optional[str] = "body",
               summary: str = "summary") -> str:
    """构造一条生成服务回复, 续写内容包含 num_words 个单词"""
    payload = {
        "continuation": " ".join(f"w{i}" for i in range(num_words)),
        "continuation_summary": summary,
        "completed": completed,
    }
    if script_type is not None:
        payload["script_type"] = script_type
    return "```json\n" + json.dumps(payload) + "\n```"


class FakeModelManager(ModelManager):
    """按顺序回放预设回复, 异常实例会被抛出; 回复用完后重复最后一条"""

    def __init__(self, replies: List):
        self.replies = list(replies)
        self.calls = []

    def generate(self, messages, params):
        self.calls.append(messages)
        index = min(len(self.calls) - 1, len(self.replies) - 1)
        reply = self.replies[index]
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def writer_config():
    return BaseConfig()


@pytest.fixture
def failing_manager():
    return FakeModelManager([GenerationError("boom")])
