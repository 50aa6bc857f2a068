#! /usr/bin/env python3

import numpy as np

import figplot

x = np.linspace(-2, 2, 41)

with figplot.rc_context({'lines.linewidth': 1.5, 'axes.grid': True}):
    fig = figplot.Figure(figsize=('12cm', '9cm'), dpi=150)
    ax = fig.add_axes([.12, .12, .8, .8])
    ax.plot(x, x**2, 'r-', label='x²')
    ax.plot(x, x**3, 'g--', label='x³')
    ax.scatter(x[::5], np.abs(x[::5]), c='steelblue', label='|x|')
    ax.set_ylim(-3, 5)
    ax.xlabel = 'x'
    ax.ylabel = 'f(x)'
    ax.legend()
    fig.save('demo3.png')
