#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.query import BigQueryConfig, BigQueryRESTConnector, GoogleAuthTokenProvider, Result


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a SQL query against BigQuery via REST")
    p.add_argument("project_id")
    p.add_argument("sql", nargs="?", default="SELECT sepal_length, sepal_width FROM iris LIMIT 10")
    p.add_argument("--dataset", default=None)
    p.add_argument("--param", action="append", default=[], help="Positional parameter (string)")
    p.add_argument("--max-results", type=int, default=10000)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    config = BigQueryConfig(
        project_id=args.project_id,
        default_dataset_id=args.dataset,
        max_results=args.max_results,
    )

    async with BigQueryRESTConnector(config, token_provider=GoogleAuthTokenProvider()) as bq:
        response = await bq.query(args.sql, args.param)
        if not isinstance(response.body, Result):
            print(f"Query failed (HTTP {response.status}): {response.body}")
            return

        result = response.body
        print("=" * 65)
        print(f"Job id     : {result.job_id}")
        print(f"Rows       : {result.num_rows}")
        print(f"Columns    : {', '.join(result.columns)}")
        print("=" * 65)
        async for row in result.rows:
            print(" | ".join(str(value) for value in row))
        print("=" * 65)
        print(f"Pages fetched after the first: {result.rows.pages_fetched}")


if __name__ == "__main__":
    asyncio.run(main())
