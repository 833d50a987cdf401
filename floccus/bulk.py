# -*- coding: utf-8 -*-
#
# Copyright 2019 Klimaat

"""
Bulk evaluation of formulas over sequences and grids.

Every strategy validates all inputs before computing any output.  The
sequential strategies report the first invalid element (left to right for
sequences, first argument for grids); the threaded ones report whichever
invalid chunk is found first and stop validating the rest.
"""

import os
import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

import numpy as np

from floccus import diagnostics
from floccus.config import get_config
from floccus.errors import InputError

logger = logging.getLogger(__name__)

# Chunks handed out per worker
CHUNKS_PER_WORKER = 4


def resolve_workers(workers=None):
    """
    Worker count: explicit, else configured, else the executor default.
    """
    if workers is None:
        workers = get_config().workers
    if workers is None:
        workers = min(32, (os.cpu_count() or 1) + 4)
    if workers < 1:
        raise ValueError("Number of workers must be positive, got %d" % workers)
    return workers


def split(n, chunks):
    """
    Split range(n) into at most chunks contiguous (start, stop) slices
    """
    chunks = max(1, min(n, chunks))
    edges = np.linspace(0, n, chunks + 1).astype(int)
    return [(int(a), int(b)) for a, b in zip(edges[:-1], edges[1:]) if b > a]


def get_rows(formula, sequences):
    """
    Transpose equal-length input sequences into per-element argument tuples.
    """
    if len(sequences) != len(formula.inputs):
        raise TypeError(
            "%s takes %d sequences (%d given)"
            % (formula.__name__, len(formula.inputs), len(sequences))
        )
    sequences = [list(s) for s in sequences]
    lengths = [len(s) for s in sequences]
    if len(set(lengths)) > 1:
        raise ValueError("Input sequences differ in length: %r" % lengths)
    rows = list(zip(*sequences))
    for args in rows:
        formula.check_arguments(args)
    return rows


def check_grids(formula, grids):
    """
    Return the common shape of the input grids.
    """
    formula.check_arguments(grids)
    shapes = [grid.shape for grid in grids]
    if len(set(shapes)) > 1:
        raise ValueError("Input grids differ in shape: %r" % shapes)
    return shapes[0]


def compute_many(formula, *sequences):
    """
    Validate every element, then compute every element.
    Returns a list of output quantities.
    """
    rows = get_rows(formula, sequences)

    for args in rows:
        try:
            formula.validate_inputs(*args)
        except InputError as error:
            diagnostics.notify(formula, error, args)
            raise

    return [formula.compute_unchecked(*args) for args in rows]


def compute_many_parallel(formula, *sequences, workers=None):
    """
    As compute_many with chunks validated and computed on a thread pool.
    Output order matches input order.  When several elements are invalid
    any one of their errors may be raised.
    """
    rows = get_rows(formula, sequences)
    if not rows:
        return []

    workers = resolve_workers(workers)
    chunks = [rows[a:b] for a, b in split(len(rows), workers * CHUNKS_PER_WORKER)]
    failed = threading.Event()

    def validate(chunk):
        for args in chunk:
            if failed.is_set():
                return None
            try:
                formula.validate_inputs(*args)
            except InputError as error:
                failed.set()
                return error, args
        return None

    def compute(chunk):
        return [formula.compute_unchecked(*args) for args in chunk]

    logger.debug(
        "%s: %d elements in %d chunks on %d workers",
        formula.__name__, len(rows), len(chunks), workers,
    )

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(validate, chunk) for chunk in chunks]
        for future in as_completed(futures):
            failure = future.result()
            if failure is not None:
                for other in futures:
                    other.cancel()
                error, args = failure
                diagnostics.notify(formula, error, args)
                raise error

        return [q for result in executor.map(compute, chunks) for q in result]


def compute_grid(formula, *grids):
    """
    Validate and compute array-valued quantities of a common shape in one
    vectorised pass.  The output has the same shape as the inputs.
    """
    check_grids(formula, grids)

    try:
        formula.validate_inputs(*grids)
    except InputError as error:
        diagnostics.notify(formula, error, grids)
        raise

    return formula.compute_unchecked(*grids)


def compute_grid_parallel(formula, *grids, workers=None):
    """
    As compute_grid with the flattened grid split into chunks that are
    validated and computed on a thread pool.
    """
    shape = check_grids(formula, grids)
    size = int(np.prod(shape))
    if size == 0 or not shape:
        return compute_grid(formula, *grids)

    workers = resolve_workers(workers)
    flat = [grid.get_si_value().ravel() for grid in grids]
    chunks = [
        tuple(kind(values[a:b]) for kind, values in zip(formula.inputs, flat))
        for a, b in split(size, workers * CHUNKS_PER_WORKER)
    ]
    failed = threading.Event()

    def validate(chunk):
        if failed.is_set():
            return None
        try:
            formula.validate_inputs(*chunk)
        except InputError as error:
            failed.set()
            return error
        return None

    def compute(chunk):
        return formula.compute_unchecked(*chunk).get_si_value()

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(validate, chunk) for chunk in chunks]
        for future in as_completed(futures):
            error = future.result()
            if error is not None:
                for other in futures:
                    other.cancel()
                diagnostics.notify(formula, error, grids)
                raise error

        values = np.concatenate(list(executor.map(compute, chunks)))

    return formula.output(values.reshape(shape))
