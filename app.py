from dotenv import load_dotenv
import argparse

load_dotenv(override=True)

from script_writer.generator import generate_script_with_options
from script_writer.show import print_save
from script_writer.log_config import loggers

logger = loggers['main']

def get_args():
    parser = argparse.ArgumentParser()

    parser.add_argument("topic", nargs="?", type=str, help="脚本主题")
    parser.add_argument("--max-words", default=1000, type=int, help="最大字数(10-40000)")
    parser.add_argument("--style", default="conversational", type=str,
                        choices=["conversational", "professional", "entertaining"], help="写作风格")
    parser.add_argument("--output", default=None, type=str, help="保存脚本的文件路径")

    return parser.parse_args()

def main():
    args = get_args()
    topic = args.topic or input("请输入脚本主题：")
    logger.info(f"脚本主题: {topic}")

    result = generate_script_with_options(topic, args.max_words, style=args.style)
    print_save(result, args.output)
    return 0 if result.success else 1

if __name__ == "__main__":

    raise SystemExit(main())
