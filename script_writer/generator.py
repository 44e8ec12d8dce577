import math
from typing import Optional

from script_writer.config_loader import ModelConfig, BaseConfig
from script_writer.log_config import loggers
from script_writer.model import ScriptMetadata, ScriptResult
from script_writer.model_manager import ModelManager
from script_writer.prompt import STYLE_SUFFIXES
from script_writer.state import ScriptState
from script_writer.workflow import create_workflow, RECURSION_LIMIT

logger = loggers['main']


def efficiency(word_count: int, max_words: int) -> int:
    """字数预算利用率, 四舍五入到整数百分比"""
    return int(math.floor(100 * word_count / max_words + 0.5))


def generate_script(app, initial_state: ScriptState) -> ScriptResult:
    """运行已编译的工作流并整理结果"""
    topic, max_words = initial_state.topic, initial_state.max_words
    logger.info(f"开始生成脚本: \"{topic}\" (最多{max_words}词)")

    result = ScriptState(**app.invoke(
        initial_state.model_dump(),
        {"recursion_limit": RECURSION_LIMIT}
    ))

    logger.info("脚本生成完成!")
    logger.info(f"最终字数: {result.word_count}/{max_words}")
    logger.info(f"迭代次数: {result.iterations}")

    return ScriptResult(
        success=True,
        script=result.script.strip(),
        metadata=ScriptMetadata(
            word_count=result.word_count,
            iterations=result.iterations,
            final_type=result.script_type,
            efficiency=efficiency(result.word_count, max_words)
        )
    )


def generate_youtube_script(topic: str, max_words: int = 1000,
                            model_config: Optional[ModelConfig] = None,
                            model_manager: Optional[ModelManager] = None,
                            writer_config: Optional[BaseConfig] = None) -> ScriptResult:
    """顶层入口, 任何错误都转为 success=False 的结果返回"""
    try:
        # 先校验字数范围, 越界时不会构建客户端, 也不会调用生成服务
        initial_state = ScriptState.initial(topic, max_words)
        app = create_workflow(model_config, model_manager=model_manager, writer_config=writer_config)
        return generate_script(app, initial_state)
    except Exception as e:
        logger.error(f"脚本生成失败: {str(e)}")
        return ScriptResult(success=False, error=str(e))


def generate_script_with_options(topic: str, max_words: int = 1000, style: str = "conversational",
                                 **kwargs) -> ScriptResult:
    styled_topic = topic + STYLE_SUFFIXES.get(style, "")
    return generate_youtube_script(styled_topic, max_words, **kwargs)
