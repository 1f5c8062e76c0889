from cargo_loader.config import RunConfig
from cargo_loader.models import Good
from cargo_loader.staging import StagingList

from load_goods import run


def main():
    # Goods from the classroom example: B does not fit after A
    staged = StagingList()
    staged += Good("A", 100, 10)
    staged += Good("B", 450, 20)
    staged += Good("C", 400, 15)

    cfg = RunConfig(
        worker_name="Budi",
        worker_rate=5000,
        carrier_type="Truk Ekspedisi",
        carrier_capacity=500,
    ).validate()

    run(cfg, staged, compare_optimal=True)


if __name__ == "__main__":
    main()
