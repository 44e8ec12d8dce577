"""
定义脚本生成流程的状态, 每次迭代基于上一次状态产生新状态
"""

from typing import Optional
from pydantic import BaseModel, Field

from script_writer.config_loader import MIN_WORDS, MAX_WORDS

class ScriptState(BaseModel):
    # 创作主题, 整个流程中不变
    topic: str

    # 字数控制
    max_words: int = Field(ge=MIN_WORDS, le=MAX_WORDS)
    word_count: int = Field(default=0, ge=0)
    word_remaining: int = 0

    # 累积内容
    script: str = ""
    summary: str = ""   # 每段摘要拼接, 代替完整脚本作为后续上下文

    # 流程控制
    completed: bool = False
    script_type: Optional[str] = None
    iterations: int = Field(default=0, ge=0)
    error_count: int = Field(default=0, ge=0)

    @classmethod
    def initial(cls, topic: str, max_words: int) -> "ScriptState":
        """构建初始状态, max_words 越界时抛出 ValidationError"""
        return cls(topic=topic, max_words=max_words, word_remaining=max_words)

    @property
    def is_first_iteration(self) -> bool:
        return self.word_count == 0
