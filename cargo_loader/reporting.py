# reporting.py
# Turns loading results into text for the terminal.

import pandas as pd

SEPARATOR = "-" * 37


def attempt_line(attempt):
    if attempt.loaded:
        return f"{attempt.good.name} loaded."
    return f"ERROR: Capacity full! {attempt.good.name} could not be loaded."


def price_line(good, currency="Rp"):
    return f"Price per kg of {good.name} is {currency} {good.unit_price:.2f}"


def goods_frame(goods):
    """
    Build a dataframe of loaded goods, one row per good.
    """
    rows = []
    for good in goods:
        rows.append({
            "name": good.name,
            "weight_kg": good.weight,
            "unit_price": good.unit_price,
            "value": good.compute_value(),
        })

    return pd.DataFrame(rows, columns=["name", "weight_kg", "unit_price", "value"])


def goods_listing(goods):
    goods = list(goods)
    if len(goods) == 0:
        return "No goods were loaded."

    df = goods_frame(goods)
    return df.to_string(index=False, float_format=lambda v: f"{v:.2f}")


def summary_block(summary, currency="Rp"):
    lines = [
        "ECONOMIC SUMMARY",
        f"Carrier             : {summary.carrier_type}",
        f"Loader              : {summary.worker_name}",
        f"Loader rate         : {currency} {summary.worker_rate:.2f} per kg",
        f"Total weight        : {summary.total_weight:.2f} kg",
        f"Total value         : {currency} {summary.total_value:.2f}",
        f"Loading cost        : {currency} {summary.service_cost:.2f}",
        f"Capacity utilization: {summary.utilization_percent:.2f}%",
        SEPARATOR,
        f"PROFIT              : {currency} {summary.profit:.2f}",
    ]
    return "\n".join(lines)


def comparison_block(comparison, currency="Rp"):
    chosen = ", ".join(g.name for g in comparison["chosen_goods"]) or "-"
    lines = [
        "BEST POSSIBLE LOAD",
        f"Solver status       : {comparison['status']}",
        f"Best value          : {currency} {comparison['best_value']:.2f}",
        f"Best weight         : {comparison['best_weight']:.2f} kg",
        f"Goods               : {chosen}",
        f"First-fit value     : {currency} {comparison['first_fit_value']:.2f}",
        f"Value left behind   : {currency} {comparison['value_gap']:.2f}",
    ]
    return "\n".join(lines)


def full_report(attempts, summary, currency="Rp"):
    """
    Everything printed after the input phase, in order:
    loading progress, goods on board, their prices, then the totals.
    """
    parts = ["", "\t\tLOADING PROCESS"]
    for attempt in attempts:
        parts.append(attempt_line(attempt))

    parts.append("")
    parts.append("\t\tGOODS ON THE CARRIER")
    parts.append(goods_listing(summary.goods))
    for good in summary.goods:
        parts.append(price_line(good, currency))

    parts.append("")
    parts.append(summary_block(summary, currency))
    return "\n".join(parts)
