import json
import re
from typing import List, Optional

from script_writer.log_config import loggers

logger = loggers['agent']


# 工具函数：JSON提取逻辑
def extract_json(generated_text: str) -> Optional[str]:
    """从生成的文本中提取JSON对象，优先处理被```json标记包裹的内容"""
    if not generated_text:
        return None

    # 首先尝试匹配被```json和```包裹的内容（最常见情况）
    json_block_match = re.search(r'```(?:json)?\s*([\s\S]*?)\s*```', generated_text)
    if json_block_match:
        json_content = json_block_match.group(1).strip()
        try:
            json.loads(json_content)
            return json_content
        except json.JSONDecodeError:
            logger.debug("提取的JSON块格式无效，尝试其他提取方式")

    # 如果没有找到标记包裹的JSON，尝试匹配纯JSON对象
    json_obj_match = re.search(r'\{[\s\S]*\}', generated_text)
    if json_obj_match:
        json_content = json_obj_match.group(0).strip()
        try:
            json.loads(json_content)
            return json_content
        except json.JSONDecodeError:
            logger.debug("提取的JSON对象格式无效")

    return None


def split_words(text: str) -> List[str]:
    """按连续空白切分单词"""
    return text.split()


def count_words(text: str) -> int:
    return len(split_words(text))


def truncate_words(text: str, limit: int) -> str:
    """截断为前 limit 个单词, 以单个空格连接"""
    return " ".join(split_words(text)[:max(0, limit)])
