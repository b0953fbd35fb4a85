"""Index a set of documents and run a two-keyword OR query.

Usage:
    python -m littlesearch.search \
        --docs docs.txt --noise noisewords.txt --query "rain sun" [--limit 5]
    python -m littlesearch.search \
        --docs docs.txt --noise noisewords.txt --show-index rain
"""

import argparse
import sys

from littlesearch.engine import SearchEngine
from littlesearch.errors import SourceNotFoundError, UsageError
from littlesearch.query import TOP_K, parse_query


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Keyword OR search over documents")
    parser.add_argument(
        "--docs", required=True, help="File listing document paths, one per token"
    )
    parser.add_argument("--noise", required=True, help="File listing noise words")
    parser.add_argument("--query", help='Two keywords, e.g. "rain sun"')
    parser.add_argument(
        "--limit", type=int, default=TOP_K, help="Maximum number of documents"
    )
    parser.add_argument(
        "--show-index", metavar="KEYWORD", help="Print the occurrences of a keyword"
    )
    args = parser.parse_args(argv)

    if args.query is None and args.show_index is None:
        parser.error("one of --query or --show-index is required")
    keywords = None
    if args.query is not None:
        try:
            keywords = parse_query(args.query.lower())
        except UsageError as e:
            parser.error(str(e))
    if args.limit < 1:
        parser.error(f"--limit must be at least 1, got {args.limit}")

    engine = SearchEngine()
    print(f"Indexing documents listed in {args.docs}...")
    try:
        n_docs = engine.make_index(args.docs, args.noise)
    except SourceNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Indexed {n_docs} documents, {len(engine.index)} keywords")

    if args.show_index is not None:
        df = engine.index.to_polars(args.show_index.lower())
        if len(df) == 0:
            print(f"No occurrences of {args.show_index!r}")
        else:
            for row in df.iter_rows(named=True):
                print(f"  {row['rank']}. {row['doc_id']} (frequency {row['frequency']})")

    if keywords is not None:
        docs = engine.top5search(*keywords, limit=args.limit)
        print(f"Documents found = {docs}")


if __name__ == "__main__":
    main()
