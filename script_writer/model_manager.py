from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List
import time
from openai import (
    OpenAI,
    APIError,
    APIConnectionError,
    APITimeoutError
)

from script_writer.config_loader import BaseConfig
from script_writer.log_config import loggers

logger = loggers['agent']


class GenerationError(Exception):
    """生成服务调用失败（网络错误、超时、回复格式不正确）"""


# 抽象基类 - 生成服务的窄接口
class ModelManager(ABC):
    @abstractmethod
    def generate(self, messages: List[Dict[str, Any]], params: BaseConfig) -> str:
        pass

# API调用管理
class APIModelManager(ModelManager):

    def __init__(self, api_url: str, api_key: Optional[str]=None, model_name: Optional[str]=None,
                 timeout: float=30, max_retries: int=1, retry_delay=1):
        if not api_key:
            raise ValueError("缺少 API 密钥, 请设置 LLM_API_KEY")
        if not model_name:
            raise ValueError("缺少模型名, 请设置 LLM_MODEL_NAME")
        self.model_name = model_name
        # 超时由客户端负责, SDK 自带的重试关闭, 统一由下面的循环控制
        self.client = OpenAI(
            api_key=api_key,
            base_url=api_url,
            timeout=timeout,
            max_retries=0
        )
        self.max_retries = max(1, max_retries)
        self.retry_delay = retry_delay

    def generate(self, messages: List[Dict[str, Any]], params: BaseConfig) -> str:
        request = dict(
            model=self.model_name,
            messages=messages,
            temperature=params.temperature,
            top_p=params.top_p,
            max_tokens=params.max_new_tokens
        )
        if params.json_mode:
            request["response_format"] = {"type": "json_object"}

        last_error = None
        for attempt in range(self.max_retries):
            try:
                response = self.client.chat.completions.create(**request)
                # 部分兼容接口会返回空的 choices 或空 message
                if not response.choices or response.choices[0].message is None:
                    raise GenerationError("API 返回的回复中没有消息")
                content = response.choices[0].message.content
                if not content:
                    raise GenerationError("API 返回了空内容")
                return content
            except (APIError, APIConnectionError, APITimeoutError) as e:
                # 捕获常见的API错误
                last_error = e
                logger.warning(f"API 调用失败 (尝试 {attempt+1}/{self.max_retries}): {str(e)}")
                if attempt+1 < self.max_retries:
                    logger.info(f"将在 {self.retry_delay} 秒后重试...")
                    time.sleep(self.retry_delay)
        raise GenerationError(f"经过 {self.max_retries} 次尝试后，API请求仍失败: {last_error}")
