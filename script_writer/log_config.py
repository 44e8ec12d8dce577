import logging
import os
from datetime import datetime

def setup_logging():
    """配置项目日志系统"""
    # 配置日志格式
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers = [logging.StreamHandler()]

    # 可选: 同时写入日志文件
    if os.getenv("SCRIPT_WRITER_LOG_FILE", "").lower() in ("1", "true", "yes"):
        log_dir = "logs"
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"script_writer_{timestamp}.log")
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    level = os.getenv("SCRIPT_WRITER_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=log_format,
        datefmt=date_format,
        handlers=handlers
    )

    # 为不同模块创建专用日志器
    modules = ['workflow', 'node', 'agent', 'main']
    loggers = {module: logging.getLogger(module) for module in modules}

    return loggers

# 初始化日志器
loggers = setup_logging()
