"""
输出生成结果, 可选保存到文件
"""
from typing import Optional

from script_writer.model import ScriptResult


def print_save(result: ScriptResult, output_path: Optional[str] = None):
    print("*"*80)
    print("流程结束，处理结果")
    if not result.success:
        print(f"\n生成失败: {result.error}")
        return

    metadata = result.metadata
    print(f"\n脚本生成完成! 共 {metadata.word_count} 词, {metadata.iterations} 次迭代")
    print(f"最后一段类型: {metadata.final_type or 'N/A'} | 预算利用率: {metadata.efficiency}%")
    print("-" * 80)
    print("SCRIPT:\n", result.script)

    if output_path:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(result.script + "\n")
        print(f"\n内容已保存到 {output_path}")
