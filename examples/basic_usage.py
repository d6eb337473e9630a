"""
Basic usage example for Bahith library.

This example demonstrates the core workflow:
1. Load the bundled catalog
2. Search for a query in Arabic or English
3. Output ranked results as JSON
"""

import json

from bahith import SearchEngine, get_settings
from bahith._logging import configure_logging


def search_query(query: str, limit: int = 5):
    """
    Search the bundled catalog and explain the ranking.

    Args:
        query: Query in Arabic or Latin script
        limit: Maximum number of results

    Returns:
        List of results as dictionaries
    """
    print(f"Searching for: {query}")
    print("=" * 50)

    # Step 1: Load catalog
    print("\n📚 Step 1: Loading catalog...")

    engine = SearchEngine.with_default_catalog()
    counts = engine.snapshot.counts()
    print(f"   Loaded {sum(counts.values())} records")
    for category, count in counts.items():
        print(f"   - {category.value}: {count}")

    # Step 2: Search
    print("\n🔍 Step 2: Searching...")

    results = engine.search(query, engine.default_options(limit=limit))
    print(f"   Found {len(results)} results")

    # Show ranked results
    print("\n📊 Results:")
    for result in results:
        print(
            f"   {result.record.title('ar')} / {result.record.title('en')} "
            f"[{result.kind.value}] score={result.final_score:.2f}"
        )
        print(f"      {engine.ranker.explain(result)}")

    if not results:
        similar = engine.find_similar(query)
        if similar:
            names = ", ".join(engine.format_result(r) for r in similar)
            print(f"   Did you mean: {names}?")

    # Step 3: Create output
    print("\n📄 Step 3: Creating JSON output...")

    output = []
    for result in results:
        output.append({
            "id": result.id,
            "category": result.category.value,
            "name_ar": result.record.name_ar,
            "name_en": result.record.name_en,
            "match": result.kind.value,
            "matched_text": result.matched_text,
            "score": round(result.score, 3),
            "final_score": round(result.final_score, 3),
        })

    return output


# Example usage
if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python basic_usage.py <query> [limit]")
        print("Example: python basic_usage.py 'Mohamed Ayub' 5")
        sys.exit(1)

    configure_logging(get_settings().log_level)

    query = sys.argv[1]
    limit = int(sys.argv[2]) if len(sys.argv) > 2 else 5

    output = search_query(query, limit)
    print(json.dumps(output, ensure_ascii=False, indent=2))

    print("\n🎉 Done!")
