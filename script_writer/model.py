from pydantic import BaseModel
from typing import Literal, Optional

ScriptType = Literal["hook", "intro", "body", "conclusion"]

# 生成服务的结构化回复
class ScriptContinuation(BaseModel):
    continuation: str               # 新写出的脚本续写内容
    continuation_summary: str       # 本段续写的简要摘要
    completed: bool                 # 模型是否认为脚本已经写完
    script_type: Optional[ScriptType] = None  # 本段内容类型（开场钩子、引言、正文、结尾）

# 脚本元数据
class ScriptMetadata(BaseModel):
    word_count: int                 # 最终字数
    iterations: int                 # 成功的迭代次数
    final_type: Optional[str] = None  # 最后一段的内容类型
    efficiency: int                 # 字数预算利用率（百分比）

# 顶层调用结果，无论成功失败都返回该结构
class ScriptResult(BaseModel):
    success: bool
    script: str = ""
    metadata: Optional[ScriptMetadata] = None
    error: Optional[str] = None
