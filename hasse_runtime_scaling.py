"""
Measure & plot runtime of the covering edge search with each set
representation, for various record counts and lengths.
"""

import sys
import time
import timeit
from typing import Iterable, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from sklearn_hasse.concrete import REPRESENTATIONS


def time_hasse(representation: str, dataset_args: str
               ) -> Optional[Sequence[float]]:
    setup = ';\n'.join((
        "from sklearn_hasse import datasets, HasseEstimator",
        "records = datasets.make_random_records(%s)" % dataset_args,
        "estimator = HasseEstimator(representation=%r)" % representation))
    stmt = "estimator.fit(records)"
    timer = timeit.Timer(stmt, setup)
    try:
        ti_number, raw_autorange_timing = timer.autorange()
        raw_timings = timer.repeat(number=ti_number) + [raw_autorange_timing]
    except ValueError:
        return None
    return sorted(timing / ti_number for timing in raw_timings)


def n_records_gen(max=np.inf) -> Iterable[int]:
    mg = 1
    while mg * 50 < max:
        for t in (10, 20, 50):
            yield t * mg
        mg *= 10


def timing_for_param(representation: str, max_records: int = 5000
                     ) -> Iterable:
    for n_records in n_records_gen(max_records):
        for max_length in (2, 8, 32, 128, 512):
            argstr = "max_length=%d, n_records=%d, random_state=0" \
                     % (max_length, n_records)
            timings = time_hasse(representation, argstr)
            if timings:
                yield n_records, max_length, timings


def plot_timings(timings, title=None, figure=None):
    from matplotlib.ticker import LogLocator, LogFormatter
    if figure is None:
        figure: plt.Figure = plt.figure()
    axes = figure.add_subplot(xlabel='n_records', ylabel='time[s]')
    if title is not None:
        axes.set_title(title)
    n_records = timings.T[0]
    max_length = timings.T[1]
    tm_min = timings.T[2]
    for length in np.unique(max_length):
        mask = max_length == length
        axes.loglog(n_records[mask], tm_min[mask], '.-', label=str(length))
    axes.legend(title='max_length')
    axes.grid(True)
    figure.tight_layout()
    # show more ticks
    axes.xaxis.set_major_locator(LogLocator(subs='all'))
    axes.xaxis.set_major_formatter(LogFormatter(minor_thresholds=(100, 99)))
    axes.yaxis.set_major_locator(LogLocator(subs='all'))
    return figure


def log(message):
    print("%s %s" % (time.strftime('%Y-%m-%dT%H:%M:%S%z'), message),
          file=sys.stderr)


if __name__ == "__main__":
    representations = sys.argv[1:] or sorted(REPRESENTATIONS)

    for representation in representations:
        log("start timing of %s" % representation)
        print("n_records, max_length, timings...")
        all_timings = []
        try:
            for n_records, max_length, timings in \
                    timing_for_param(representation):
                onelist = [n_records, max_length] + timings
                all_timings.append(onelist)
                print('[' + ",".join([str(x) for x in onelist]) + '],')
        except KeyboardInterrupt:
            pass
        log("stop timing of %s, got %d timings"
            % (representation, len(all_timings)))
        if all_timings:
            log("plotting")
            plot_timings(np.array(all_timings),
                         'runtime of %s' % representation).show()

    input('Press any key to exit.')
