#!/usr/bin/env python3
"""
Example: Exploring a pivot table interactively.

This script demonstrates how to:
1. Configure an engine from a sample table config
2. Expand row and column headers
3. Sort a flat table by a column
4. Contract headers back to the overview
"""

import os
import sys
import logging
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pivotnav.table.engine import PivotEngine
from pivotnav.table.sorting import sort_rows
from configs.tables import create_sku_table_config, create_sales_table_config


def print_table(engine):
    table = engine.table_data
    if table.is_empty:
        print("(empty table)")
        return table
    print(table.to_frame().to_string())
    print(f"can_sort_columns={table.can_sort_columns}")
    return table


def run_demo():
    """Run a demonstration drill-down session."""
    print("=" * 60)
    print("PivotNav Demo: Hierarchical Cross-Tabulation")
    print("=" * 60)

    print("\n1. SKU table, brand on columns")
    engine = PivotEngine(create_sku_table_config())
    print_table(engine)

    print("\n2. Moving category to rows")
    category = engine.available.pop(0)
    engine.chosen_rows.append(category)
    table = print_table(engine)

    print("\n3. Sorting rows by the grand-total column, descending")
    for row in sort_rows(table, "rowSum", descending=True):
        cells = [cell.label for cell in row.values()]
        print("  " + " | ".join(cells))

    print("\n" + "=" * 60)
    print("4. Sales table: region/store x year/quarter")
    print("=" * 60)
    engine = PivotEngine(create_sales_table_config())
    table = print_table(engine)

    west = next(h for h in table.row_headers if h.value == "West")
    engine.expand_row(west)
    print(f"\n  -> Expanded row {west.path_id}")
    table = print_table(engine)

    year = next(h for h in table.column_headers if h.value == 2023)
    engine.expand_column(year)
    print(f"\n  -> Expanded column {year.path_id}")
    table = print_table(engine)

    engine.contract_row(west)
    engine.contract_column(year)
    print("\n  -> Contracted both headers")
    print_table(engine)

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    run_demo()
