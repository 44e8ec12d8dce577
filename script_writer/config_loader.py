import os
import yaml
from pydantic import BaseModel, ConfigDict
from pathlib import Path
from typing import Dict, Any, Optional

DEFAULT_BASE_URL = "https://api.longcat.chat/openai"

# 循环控制常量, 改变会影响可观察的行为, 不开放配置
MAX_ERRORS = 3              # 生成失败次数上限, 达到后强制结束
MAX_ITERATIONS = 20         # 迭代次数上限, 超过后强制结束
COMPLETION_THRESHOLD = 50   # 剩余字数不超过该值时强制结束

# 字数范围
MIN_WORDS = 10
MAX_WORDS = 40000


class ModelConfig(BaseModel):
    model_type: str = "api"
    model_name: Optional[str] = None
    api_url: Optional[str] = DEFAULT_BASE_URL
    api_key: Optional[str] = None
    timeout: float = 30     # 单次请求超时(秒)
    max_retries: int = 1    # 客户端内部尝试次数, 外层循环另有重试
    retry_delay: int = 1    # 等待延迟，可选

    model_config = ConfigDict(protected_namespaces=())

    @classmethod
    def from_env(cls, loader: Optional["ConfigLoader"] = None, **overrides) -> "ModelConfig":
        """从环境变量构建模型配置, config.yaml 中的 model_config 可覆盖客户端参数"""
        values = {
            "api_key": os.getenv("LLM_API_KEY"),
            "model_name": os.getenv("LLM_MODEL_NAME"),
            "api_url": os.getenv("LLM_BASE_URL") or DEFAULT_BASE_URL,
        }
        values.update((loader or ConfigLoader()).model_overrides)
        values.update(overrides)
        return cls(**values)


class BaseConfig(BaseModel):
    max_new_tokens: int = 2000
    temperature: float = 0.7
    top_p: float = 0.9
    json_mode: bool = False  # 是否请求 response_format=json_object


class ConfigLoader:
    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or os.getenv("SCRIPT_WRITER_CONFIG", "config.yaml"))
        self.config_data = self._load_config()

        self.writer_config = BaseConfig(**(self.config_data.get("writer_config") or {}))
        self.model_overrides: Dict[str, Any] = self.config_data.get("model_config") or {}

    def _load_config(self) -> Dict[str, Any]:
        """加载并解析YAML配置文件, 文件不存在时使用默认值"""
        if not self.config_path.exists():
            return {}
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"YAML配置文件解析错误: {str(e)}")

