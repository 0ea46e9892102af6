"""
This module provides plotting helpers for continued fractions using Matplotlib.
"""

import matplotlib.pyplot as plt


def create_canvas(rcstyle=None, **kwargs) -> tuple:
    """
    Create a Matplotlib canvas with a figure and axes.

    A figure can be passed as `fig` or axes as `ax`; otherwise a new pair is created.

    Parameters:
        rcstyle (str): The Matplotlib style to use.
        **kwargs: Arbitrary keyword arguments. Can include `fig` for a Matplotlib figure or `ax` for axes.

    Returns:
        tuple: A tuple containing the figure, axes, and remaining keyword arguments.
    """

    if rcstyle is not None:
        plt.style.use(rcstyle)

    if "fig" in kwargs.keys():
        fig = kwargs.pop("fig")
        ax = fig.gca()
    elif "ax" in kwargs.keys():
        ax = kwargs.pop("ax")
        fig = ax.figure
    else:
        fig, ax = plt.subplots()

    kwargs.pop("fig", None)
    kwargs.pop("ax", None)

    return fig, ax, kwargs


def plot_convergents(cf, nterms=20, **kwargs):
    """
    Plots the error of the convergents :math:`p_k/q_k` of a continued fraction against :math:`k`.

    The error is taken with respect to the last convergent computed, so it is exactly zero
    for the last point of a finite expansion; that point is dropped from the log scale.

    Args:
        cf (ContinuedFraction): The continued fraction.
        nterms (int, optional): The number of convergents. Defaults to 20.
        **kwargs: Passed to :func:`create_canvas` (`fig`, `ax`, `rcstyle`) and then to ``ax.semilogy``.

    Returns:
        tuple: The figure and the axes.
    """
    rcstyle = kwargs.pop("rcstyle", None)
    fig, ax, kwargs = create_canvas(rcstyle, **kwargs)

    pairs = [(p, q) for p, q in cf.convergents(nterms) if q != 0]
    if not pairs:
        return fig, ax

    p_ref, q_ref = pairs[-1]
    ks, errors = [], []
    for k, (p, q) in enumerate(pairs):
        error = abs(p * q_ref - q * p_ref) / (q * q_ref)
        if error > 0:
            ks.append(k)
            errors.append(error)

    if "marker" not in kwargs.keys():
        kwargs["marker"] = "o"
    ax.semilogy(ks, errors, **kwargs)
    ax.set_xlabel(r"$k$")
    ax.set_ylabel(r"$|p_k/q_k - x|$")

    return fig, ax
