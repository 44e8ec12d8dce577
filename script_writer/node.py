from typing import Literal

from script_writer.agent import ScriptWriterAgent
from script_writer.model import ScriptContinuation
from script_writer.model_manager import GenerationError
from script_writer.state import ScriptState
from script_writer.tool import count_words, truncate_words
from script_writer.config_loader import MAX_ERRORS, MAX_ITERATIONS, COMPLETION_THRESHOLD
from script_writer.log_config import loggers

logger = loggers['node']


# -------------------- 写作 -------------------- [生成 -> 字数核算 -> 状态判断]
def llm_call_node(state: ScriptState, writer_agent: ScriptWriterAgent) -> dict:
    logger.info(f"开始生成第{state.iterations + 1}段脚本(已写{state.word_count}/{state.max_words}词)")
    try:
        response = writer_agent.write_continuation(state)
    except GenerationError as e:
        logger.error(f"生成失败: {str(e)}")
        return handle_error(state)
    return process_response(state, response)


def process_response(state: ScriptState, response: ScriptContinuation) -> dict:
    """字数核算: 超出预算时截断到剩余字数, 字数钳制为上限"""
    new_words = count_words(response.continuation)
    projected_count = state.word_count + new_words
    projected_remaining = state.max_words - projected_count

    if projected_remaining < 0:
        continuation = truncate_words(response.continuation, state.word_remaining)
        word_count = state.max_words
        logger.info(f"续写超出预算{-projected_remaining}词, 截断为{state.word_remaining}词")
    else:
        continuation = response.continuation
        word_count = projected_count
    word_remaining = max(0, state.max_words - word_count)

    update = {
        "word_count": word_count,
        "word_remaining": word_remaining,
        "script": state.script + continuation + " ",
        # 摘要不随截断调整
        "summary": state.summary + response.continuation_summary + " ",
        "completed": response.completed or word_remaining <= COMPLETION_THRESHOLD,
        "script_type": response.script_type,
        "iterations": state.iterations + 1,
    }
    log_progress(state, update, new_words)
    return update


def handle_error(state: ScriptState) -> dict:
    """记录一次失败, 达到上限后强制结束, 其余状态不变"""
    error_count = state.error_count + 1
    update = {"error_count": error_count}
    if error_count >= MAX_ERRORS:
        logger.error(f"生成失败已达{MAX_ERRORS}次, 强制结束并返回已生成内容")
        update["completed"] = True
    else:
        logger.info(f"将进行第{error_count + 1}次尝试...")
    return update


def log_progress(state: ScriptState, update: dict, new_words: int):
    logger.info(f"第{update['iterations']}次迭代:")
    logger.info(f"新增{new_words}词 | 总计: {update['word_count']}/{state.max_words}")
    logger.info(f"剩余: {update['word_remaining']}词 | 完成: {update['completed']}")
    logger.info(f"类型: {update['script_type'] or 'N/A'}")


def should_continue(state: ScriptState) -> Literal["continue", "end"]:
    """检查是否继续写作"""
    if state.completed or state.word_remaining <= 0:
        logger.info("脚本写作完成, 转移至 END")
        return "end"
    if state.iterations > MAX_ITERATIONS:
        logger.warning(f"迭代次数超过{MAX_ITERATIONS}次, 强制结束")
        return "end"
    return "continue"
