# optimizer.py
# What-if check: the best value the carrier could have taken with the same goods.
# The real load is always first-fit; this never changes what was loaded.

import pulp


def best_possible_load(goods, capacity):
    """
    goods:    list of Good objects, in arrival order
    capacity: carrier weight limit

    Solves a 0/1 knapsack: pick goods to maximize total value while the
    total weight stays within capacity.
    """
    goods = list(goods)

    # Nothing to choose from, CBC does not need to run
    if len(goods) == 0:
        return {
            "status": "Optimal",
            "best_value": 0.0,
            "best_weight": 0.0,
            "chosen_goods": [],
        }

    # Create ILP problem (maximize value)
    prob = pulp.LpProblem("Best_Load", pulp.LpMaximize)

    # One binary variable per good. Names can repeat, so index them
    x = {}
    for i, good in enumerate(goods):
        x[i] = pulp.LpVariable("x_" + str(i), lowBound=0, upBound=1, cat=pulp.LpBinary)

    # Objective: maximize total value
    prob += pulp.lpSum(good.compute_value() * x[i] for i, good in enumerate(goods))

    # Weight constraint
    prob += pulp.lpSum(good.weight * x[i] for i, good in enumerate(goods)) <= capacity

    prob.solve(pulp.PULP_CBC_CMD(msg=False))

    chosen_goods = []
    best_value = 0.0
    best_weight = 0.0

    for i, good in enumerate(goods):
        if pulp.value(x[i]) is not None and pulp.value(x[i]) > 0.5:
            chosen_goods.append(good)
            best_value += good.compute_value()
            best_weight += good.weight

    return {
        "status": pulp.LpStatus[prob.status],
        "best_value": best_value,
        "best_weight": best_weight,
        "chosen_goods": chosen_goods,
    }


def compare_with_first_fit(summary, goods, capacity):
    """
    Put the first-fit result next to the best possible one.
    value_gap is how much value first-fit left on the dock.
    """
    result = best_possible_load(goods, capacity)
    result["first_fit_value"] = summary.total_value
    result["value_gap"] = max(0.0, result["best_value"] - summary.total_value)
    return result
