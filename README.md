# sortvis

sortvis runs classic sorting algorithms one step at a time on a shared list of
numbers. While a sort runs it counts reads, writes and comparisons, keeps a
cursor that shows where the algorithm is working, and can turn the value under
the cursor into a short tone. A front end can poll this state to show a sort as
it happens.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Algorithms

Each algorithm is a subclass of `sortvis.algorithm.SortingAlgorithm` and has a
`description` string. They are in two modules:

- `sortvis.sorts_exchange`: `BitonicSort`, `BogoSort`, `BubbleSort`,
  `CocktailSort`, `CombSort`, `GnomeSort`, `StalinSort`, `PancakeSort`
- `sortvis.sorts_divide`: `HeapSort`, `InsertionSort`, `MergeSort`,
  `QuickSort`, `RadixSortLSD`, `RadixSortMSD`, `SelectionSort`, `ShellSort`

`BitonicSort` needs a number of elements that is a power of two. `StalinSort`
removes every element that is out of order, so the list can get shorter.

## Running a sort directly

```python
from sortvis.settings import Settings
from sortvis.algorithm import NumberStore
from sortvis.sorts_exchange import CocktailSort

settings = Settings()
settings.plot_do_aftercheck = False   # skip the final pass over the data
store = NumberStore([5, 3, 9, 1])
sorter = CocktailSort(settings, store)
sorter.delay_ms = 0                   # no pause between steps

sorter.run()           # sorts on the calling thread
print(store.values)    # [1, 3, 5, 9]
print(sorter.stats.comparisons, sorter.stats.reads, sorter.stats.writes)
```

Each step waits `delay_ms` milliseconds (10 by default). When
`settings.plot_do_aftercheck` is on, a finished sort then walks the cursor over
every element, which takes about two seconds in total.

`start()` runs the sort on a background thread instead. `pause()`,
`resume()`, `do_step()` and `stop()` control it while it runs, and
`wait(timeout)` blocks until the thread ends. The `finished`, `paused` and
`shuffling` properties report the state, and `stats` (also `statistics`) is a
`SortingStatistics` with `comparisons`, `reads`, `writes`, `sort_time_ms` and
`cursor_position`.

`shuffle()` fills the store with `settings.shuffle_current_count` random values
from 0 to 65535. With `settings.plot_shuffle_animated` on, this happens
gradually on a background thread that `stop_shuffling()` cancels. Use
`NumberStore.locked()` as a context manager when reading the values from
another thread.

## Using the manager

`sortvis.manager.Manager` keeps the selected algorithm, the running, paused and
shuffling state, and the elapsed `visual_time` in seconds. It starts with
`CocktailSort` selected and shuffles the numbers when it is created.

```python
from sortvis.settings import Settings
from sortvis.manager import Manager, ALGORITHM_NAMES

settings = Settings()
settings.plot_shuffle_animated = False
manager = Manager(settings)
manager.select_algorithm(ALGORITHM_NAMES.index("QuickSort"))
manager.delay_ms = 1
manager.start()
# ... call manager.update() once per frame ...
manager.stop()
```

`select_algorithm(index)` raises `IndexError` for an index outside
`ALGORITHM_NAMES`, and shuffles again if `settings.plot_shuffle_on_algo_change`
is on. `step()` advances a paused run by one move and returns whether the sort
has finished. `create_algorithm(index, settings, store)` builds a single
algorithm from the same index.

## Settings and audio

`sortvis.settings.Settings` is a dataclass holding the element count, the
cursor width, plot options (`PlotType`, `BarsType`, `Sampling`, colours and
markers), the shuffle options and the tone parameters. Its class constants give
the limits: `SHUFFLE_MAX_VALUE`, `SHUFFLE_MIN_COUNT`, `SHUFFLE_MAX_COUNT`,
`PLOT_MIN_DELAY` and `PLOT_MAX_DELAY`. `Sampling.factor` is the downsampling
factor (1, 2, 4, 8 or 16).

`sortvis.audio.Audio(settings, sink)` turns a value into a `Tone`: one second
of mono 16-bit sine or square samples at 44100 Hz, with a pitch and a volume.
`render(value)` builds the tone, and `play(value)` also passes it to the sink
and returns it, or returns `None` when `enabled` is off. `sine_wave` and
`square_wave` compute single samples.

`sortvis.utilities` has the helpers the rest of the package uses:
`map_range`, `downsample`, `multiplied_pairs`, `int_pow` and `random_between`.

## What it does not do

sortvis has no window, does no drawing and has no command to run. It does not
play sound either: `Audio` only produces sample data for the sink you provide.
Showing the numbers and playing the tones are left to the front end.