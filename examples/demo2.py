#! /usr/bin/env python3

import numpy as np

import figplot.pyplot as plt

plt.figure(figsize=('8in', '4in'))
t = np.linspace(0, 2*np.pi, 200)
for i in range(4):
    plt.subplot(1, 4, i)
    plt.plot(t, np.sin((4-i)*t), 'b-')
    plt.plot([0, 2*np.pi], [0, 0], 'k:')
    plt.title(f'sin({4-i}t)')
plt.savefig('demo2.pdf')
