"""
譯者推薦與訂單定價系統 - 主程式入口
Translator Recommendation & Order Pricing Engine - Main Entry Point
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from translator_match.config.logging_config import setup_logging
from translator_match.config.settings import set_environment, get_config_for_environment
from translator_match.core.complexity import classify_complexity
from translator_match.core.cost_model import LanguagePairCostModel, InvalidInputError
from translator_match.core.hybrid_recommender import HybridRecommender
from translator_match.models.marketplace import Order, OrderStatus
from translator_match.services.document_classifier import LLMDocumentClassifier
from translator_match.services.document_processor import HttpDocumentExtractor
from translator_match.services.store import DEFAULT_ORDER_PAGE_SIZE, load_marketplace_store, order_from_dict
from translator_match.utils.formatting import (
    format_complexity,
    format_estimated_time,
    format_estimated_time_compact,
)
from translator_match.utils.recommendation_exporter import RecommendationExporter
from translator_match.workflow.graph import OrderAnalysisWorkflow
from translator_match.workflow.state import ProcessingStatus


def setup_argument_parser() -> argparse.ArgumentParser:
    """設定命令列參數解析器"""
    parser = argparse.ArgumentParser(
        description='譯者推薦與訂單定價系統',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
範例用法:
  # 計算報價
  python main.py price --words 1000 --complexity 1.0 --source English --target Chinese

  # 固定價格報價
  python main.py price --words 1000 --fixed-price 80 --source English --target German

  # 複雜度分類
  python main.py classify --score 0.6

  # 推薦譯者並匯出
  python main.py recommend --store data/marketplace.json --order order.json --customer c1 --export output/recs.csv

  # 分析文件 (擷取 → 分類 → 定價 → 推薦)
  python main.py analyze --document https://example.com/doc.txt --source English --target Japanese --customer c1 --store data/marketplace.json

  # 訂單標籤統計
  python main.py categorize --store data/marketplace.json --tags Legal --status completed
        """
    )

    parser.add_argument(
        '--environment',
        type=str,
        default='production',
        choices=['development', 'testing', 'staging', 'production'],
        help='執行環境 (預設: production)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='日誌級別 (預設: INFO)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='詳細輸出模式'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    price_parser = subparsers.add_parser('price', help='計算翻譯報價')
    price_parser.add_argument('--words', type=int, required=True, help='文件字數')
    price_parser.add_argument('--complexity', type=float, help='複雜度分數 [0, 1]')
    price_parser.add_argument('--fixed-price', type=float, help='客戶指定的固定價格')
    price_parser.add_argument('--source', type=str, required=True, help='來源語言')
    price_parser.add_argument('--target', type=str, required=True, help='目標語言')

    classify_parser = subparsers.add_parser('classify', help='複雜度分類')
    classify_parser.add_argument('--score', type=float, required=True, help='複雜度分數')

    recommend_parser = subparsers.add_parser('recommend', help='推薦譯者')
    recommend_parser.add_argument('--store', type=str, required=True, help='市場資料 JSON 檔案')
    recommend_parser.add_argument('--order', type=str, required=True, help='訂單 JSON 檔案')
    recommend_parser.add_argument('--customer', type=str, help='客戶 ID (預設: 訂單上的客戶)')
    recommend_parser.add_argument('--limit', type=int, help='最多推薦筆數')
    recommend_parser.add_argument('--export', type=str, help='匯出路徑 (.jsonl 或 .csv)')

    analyze_parser = subparsers.add_parser('analyze', help='分析文件並報價')
    analyze_parser.add_argument('--document', type=str, required=True, help='文件 URL')
    analyze_parser.add_argument('--source', type=str, required=True, help='來源語言')
    analyze_parser.add_argument('--target', type=str, required=True, help='目標語言')
    analyze_parser.add_argument('--order-id', type=str, default='cli-order', help='訂單 ID')
    analyze_parser.add_argument('--customer', type=str, help='客戶 ID (需搭配 --store 才會推薦)')
    analyze_parser.add_argument('--store', type=str, help='市場資料 JSON 檔案')

    categorize_parser = subparsers.add_parser('categorize', help='統計訂單標籤並依標籤篩選訂單')
    categorize_parser.add_argument('--store', type=str, required=True, help='市場資料 JSON 檔案')
    categorize_parser.add_argument('--tags', type=str, help='以逗號分隔的標籤，訂單須全部包含')
    categorize_parser.add_argument('--status', type=str, choices=[s.value for s in OrderStatus], help='訂單狀態')
    categorize_parser.add_argument('--limit', type=int, default=DEFAULT_ORDER_PAGE_SIZE, help='每頁筆數')
    categorize_parser.add_argument('--offset', type=int, default=0, help='略過筆數')

    return parser


def load_order(path: str) -> Order:
    """從 JSON 檔案載入訂單"""
    with open(path, 'r', encoding='utf-8') as f:
        return order_from_dict(json.load(f))


def print_recommendations(recommendations) -> None:
    if not recommendations:
        print("沒有可推薦的譯者")
        return
    for rank, item in enumerate(recommendations, start=1):
        name = item.translator.full_name or item.translator.id
        print(
            f"{rank:>2}. {name:<24} hybrid={item.hybrid_score:.3f} "
            f"content={item.content_score:.3f} collaborative={item.collaborative_score:.3f}"
        )


def run_price(args: argparse.Namespace) -> None:
    """執行報價"""
    cost_model = LanguagePairCostModel()
    if args.fixed_price is not None:
        quote = cost_model.quote_fixed_price(args.words, args.fixed_price, args.source, args.target)
    else:
        complexity = args.complexity if args.complexity is not None else cost_model.config["default_complexity_score"]
        quote = cost_model.price(args.words, complexity, args.source, args.target)

    print(f"語言對: {quote.source_language} ({quote.source_family.value}) -> "
          f"{quote.target_language} ({quote.target_family.value}), 乘數 {quote.language_pair_multiplier}")
    print(f"複雜度: {format_complexity(quote.complexity_score)}")
    print(f"費用: {quote.cost:.2f}{' (固定價格)' if quote.is_fixed_price else ''}")
    print(f"預估時間: {format_estimated_time(quote.estimated_hours)} ({quote.estimated_hours:.2f} 小時)")


def run_classify(args: argparse.Namespace) -> None:
    """執行複雜度分類"""
    classification = classify_complexity(args.score)
    print(f"{classification.label.value}: {classification.description}")


def run_recommend(args: argparse.Namespace) -> None:
    """執行譯者推薦"""
    logger = logging.getLogger(__name__)

    store = load_marketplace_store(args.store)
    order = load_order(args.order)
    customer_id = args.customer or order.customer_id
    limit = args.limit
    if limit is None:
        limit = get_config_for_environment().get("recommendation_limit")

    recommender = HybridRecommender(store, store)
    report = recommender.recommend_with_report(order, customer_id, limit)
    if report.reason:
        logger.info(f"Recommendation note: {report.reason}")

    print(f"訂單 {order.id} ({order.source_language} -> {order.target_language}) 推薦強度: {report.get_strength()}")
    print_recommendations(report.recommendations)

    if args.export:
        RecommendationExporter().export(order.id, report.recommendations, args.export)
        print(f"推薦結果已匯出到: {args.export}")


def run_analyze(args: argparse.Namespace) -> None:
    """執行文件分析"""
    recommender = None
    if args.store and args.customer:
        store = load_marketplace_store(args.store)
        recommender = HybridRecommender(store, store)

    env_config = get_config_for_environment()
    workflow = OrderAnalysisWorkflow(
        extractor=HttpDocumentExtractor(),
        classifier=LLMDocumentClassifier(),
        recommender=recommender,
        recommendation_limit=env_config.get("recommendation_limit"),
        enable_checkpointing=bool(env_config.get("enable_checkpointing", False)),
    )
    order = Order(
        id=args.order_id,
        customer_id=args.customer or "",
        source_language=args.source,
        target_language=args.target,
        document_url=args.document,
    )
    final_state = workflow.process_order(order, args.customer)

    if final_state["processing_status"] != ProcessingStatus.COMPLETED:
        raise RuntimeError(final_state.get("error_message") or "Document analysis failed")

    quote = final_state["quote"]
    print(f"分類: {', '.join(final_state['classification'])}{' (預設)' if final_state['used_fallback'] else ''}")
    print(f"字數: {final_state['word_count']}")
    print(f"複雜度: {format_complexity(quote.complexity_score)}")
    print(f"費用: {quote.cost:.2f}")
    print(f"預估時間: {format_estimated_time_compact(quote.estimated_hours)}")
    if recommender is not None:
        print_recommendations(final_state["recommendations"])


def run_categorize(args: argparse.Namespace) -> None:
    """執行標籤統計"""
    store = load_marketplace_store(args.store)
    for tag, count in store.summarize_tags():
        print(f"{tag:<24} {count}")

    tags = [tag.strip() for tag in args.tags.split(',') if tag.strip()] if args.tags else None
    status = OrderStatus(args.status) if args.status else None
    orders = store.orders_by_tags(tags, status, args.limit, args.offset)

    print(f"\n符合條件的訂單: {len(orders)}")
    for order in orders:
        print(f"{order.id:<12} {order.status.value:<12} {order.source_language} -> {order.target_language}  {', '.join(order.tags)}")


COMMANDS = {
    'price': run_price,
    'classify': run_classify,
    'recommend': run_recommend,
    'analyze': run_analyze,
    'categorize': run_categorize,
}


def main() -> None:
    """主程式入口"""
    try:
        # 載入環境變數
        load_dotenv()

        parser = setup_argument_parser()
        args = parser.parse_args()

        set_environment(args.environment)
        setup_logging(
            log_level=args.log_level,
            verbose=args.verbose
        )

        COMMANDS[args.command](args)

    except InvalidInputError as e:
        print(f"輸入錯誤: {e}")
        sys.exit(2)
    except KeyboardInterrupt:
        print("\n程式被使用者中斷")
        sys.exit(1)
    except Exception as e:
        print(f"錯誤: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
