import os
from datetime import timedelta
from functools import reduce
from time import perf_counter, time

import numpy as np
import pandas as pd
from tensorboardX import SummaryWriter

from rangekit.tree import AGGREGATORS


class Benchmark:
    """
    Benchmark of random updates and queries, checked against a naive fold.
    """

    def __init__(
        self,
        combinator,
        log_dir,
        size=10 ** 4,
        num_ops=10 ** 4,
        eval_interval=10 ** 3,
        num_eval_queries=10,
        max_value=10 ** 6,
        seed=0,
    ):
        super().__init__()
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}.")

        self.rng = np.random.RandomState(seed)
        self.max_value = max_value

        # Aggregator and the plain list it is checked against.
        values = self.rng.randint(1, max_value, size=size).tolist()
        self.agg = AGGREGATORS[combinator](values)
        self.combine = self.agg.combine
        self.oracle = list(values)

        # Log setting.
        self.log = {"step": [], "update_usec": [], "query_usec": [], "mismatch": []}
        os.makedirs(log_dir, exist_ok=True)
        self.csv_path = os.path.join(log_dir, "log.csv")
        self.writer = SummaryWriter(log_dir=os.path.join(log_dir, "summary"))

        # Other parameters.
        self.size = size
        self.num_ops = num_ops
        self.eval_interval = eval_interval
        self.num_eval_queries = num_eval_queries

    def run(self):
        # Time to start the benchmark.
        self.start_time = time()
        update_time, num_updates = 0.0, 0
        query_time, num_queries = 0.0, 0

        for step in range(1, self.num_ops + 1):
            if self.rng.rand() < 0.5:
                pos = int(self.rng.randint(self.size))
                value = int(self.rng.randint(1, self.max_value))
                self.oracle[pos] = value
                t = perf_counter()
                self.agg.update(pos, value)
                update_time += perf_counter() - t
                num_updates += 1
            else:
                left, right = self._sample_range()
                t = perf_counter()
                self.agg.query(left, right)
                query_time += perf_counter() - t
                num_queries += 1

            if step % self.eval_interval == 0:
                self.evaluate(
                    step,
                    update_usec=1e6 * update_time / max(num_updates, 1),
                    query_usec=1e6 * query_time / max(num_queries, 1),
                )
                update_time, num_updates = 0.0, 0
                query_time, num_queries = 0.0, 0

        self.writer.close()

    def _sample_range(self):
        left, right = sorted(int(i) for i in self.rng.randint(self.size, size=2))
        return left, right

    def evaluate(self, step, update_usec, query_usec):
        mismatch = 0
        ranges = [(0, self.size - 1)] + [self._sample_range() for _ in range(self.num_eval_queries)]
        for left, right in ranges:
            expected = reduce(self.combine, self.oracle[left : right + 1])
            if self.agg.query(left, right) != expected:
                mismatch += 1

        # Log to TensorBoard.
        self.writer.add_scalar("time/update_usec", update_usec, step)
        self.writer.add_scalar("time/query_usec", query_usec, step)
        self.writer.add_scalar("check/mismatch", mismatch, step)
        print(
            f"Num ops: {step:<6}   "
            f"Update: {update_usec:<6.2f}us   "
            f"Query: {query_usec:<6.2f}us   "
            f"Mismatch: {mismatch:<3}   "
            f"Time: {self.time}"
        )

        # Log to CSV.
        self.log["step"].append(step)
        self.log["update_usec"].append(update_usec)
        self.log["query_usec"].append(query_usec)
        self.log["mismatch"].append(mismatch)
        pd.DataFrame(self.log).to_csv(self.csv_path, index=False)
        return mismatch

    @property
    def time(self):
        return str(timedelta(seconds=int(time() - self.start_time)))
