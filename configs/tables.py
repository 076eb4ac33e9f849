"""
Sample table configurations.

- SKU table: brand/category/group revenue records
- Sales table: region/store/quarter revenue records
"""

from pivotnav.table.schema import Dimension, PivotConfig


def create_sku_table_config() -> PivotConfig:
    """
    SKU revenue table.

    Dimensions: brand, category, group (brand starts on the column axis)
    Measure: revenue
    """
    brand = Dimension("brand", "Brand")
    category = Dimension("category", "Category")
    group = Dimension("group", "Group")

    records = [
        {"brand": "Leonisa", "revenue": 1, "category": "Lista1", "group": "bra"},
        {"brand": "Lumar", "revenue": 2, "category": "Lista1", "group": "panty"},
        {"brand": "Mundo Joven", "revenue": 3, "category": "Lista1", "group": "bralete"},
        {"brand": "Leo", "revenue": 4, "category": "Lista1", "group": "panty"},
        {"brand": "Leo", "revenue": 5, "category": "Lista2", "group": "bra"},
    ]

    return PivotConfig(
        records=records,
        measure="revenue",
        available=[category, group],
        chosen_columns=[brand],
    )


def create_sales_table_config() -> PivotConfig:
    """
    Store sales table.

    Dimensions: region -> store on rows, year -> quarter on columns
    Measure: revenue
    """
    stores = {"CA_1": "West", "CA_2": "West", "TX_1": "South", "WI_1": "Midwest"}

    records = []
    for year in [2022, 2023]:
        for quarter in ["Q1", "Q2", "Q3", "Q4"]:
            for i, (store, region) in enumerate(stores.items()):
                records.append({
                    "region": region,
                    "store": store,
                    "year": year,
                    "quarter": quarter,
                    "revenue": 100 * (i + 1) + (year - 2022) * 10,
                })

    return PivotConfig(
        records=records,
        measure="revenue",
        chosen_rows=[Dimension("region", "Region"), Dimension("store", "Store")],
        chosen_columns=[Dimension("year", "Year"), Dimension("quarter", "Quarter")],
    )
