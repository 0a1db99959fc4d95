import argparse
import os
from datetime import datetime

from rangekit.benchmark import Benchmark


def run(args):
    time = datetime.now().strftime("%Y%m%d-%H%M")
    log_dir = os.path.join("logs", args.combinator, f"size{args.size}-seed{args.seed}-{time}")

    benchmark = Benchmark(
        combinator=args.combinator,
        log_dir=log_dir,
        size=args.size,
        num_ops=args.num_ops,
        eval_interval=args.eval_interval,
        seed=args.seed,
    )
    benchmark.run()


if __name__ == "__main__":
    p = argparse.ArgumentParser()
    p.add_argument("--combinator", type=str, default="min", choices=["sum", "min", "max", "gcd"])
    p.add_argument("--size", type=int, default=10 ** 4)
    p.add_argument("--num_ops", type=int, default=10 ** 4)
    p.add_argument("--eval_interval", type=int, default=10 ** 3)
    p.add_argument("--seed", type=int, default=0)
    args = p.parse_args()
    run(args)
