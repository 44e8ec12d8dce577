"""
定义工作流, 核心部分
"""
from typing import Optional
from langgraph.graph import StateGraph, END
from script_writer.agent import ScriptWriterAgent
from script_writer.node import llm_call_node, should_continue
from script_writer.state import ScriptState
from script_writer.log_config import loggers
from script_writer.model_manager import ModelManager, APIModelManager
from script_writer.config_loader import (
    BaseConfig,
    ConfigLoader,
    ModelConfig,
    MAX_ERRORS,
    MAX_ITERATIONS
)

logger = loggers['workflow']

# LangGraph 递归上限, 需覆盖最大迭代次数与失败次数
RECURSION_LIMIT = (MAX_ITERATIONS + MAX_ERRORS) * 2 + 10


def create_model_manager(model_config: ModelConfig) -> ModelManager:
    if model_config.model_type != "api":
        raise ValueError(f"不支持的模型类型: {model_config.model_type}")
    return APIModelManager(
        model_config.api_url,
        model_config.api_key,
        model_name=model_config.model_name,
        timeout=model_config.timeout,
        max_retries=model_config.max_retries,
        retry_delay=model_config.retry_delay
    )


# 构建工作流
def create_workflow(model_config: Optional[ModelConfig] = None,
                    model_manager: Optional[ModelManager] = None,
                    writer_config: Optional[BaseConfig] = None):
    """创建脚本循环写作的工作流, 可直接传入 model_manager 替换生成服务"""
    if model_manager is None:
        model_manager = create_model_manager(model_config or ModelConfig.from_env())
        logger.info("成功加载api模型管理器")

    writer_agent = ScriptWriterAgent(model_manager, writer_config or ConfigLoader().writer_config)

    # 创建图
    workflow = StateGraph(ScriptState)
    workflow.add_node("llm_call",
                      lambda state: llm_call_node(state, writer_agent))

    workflow.set_entry_point("llm_call")
    workflow.add_conditional_edges(
        "llm_call",
        should_continue,
        {
            "continue": "llm_call",
            "end": END
        }
    )
    logger.info("工作流图创建完成, 开始编译!")
    return workflow.compile()
