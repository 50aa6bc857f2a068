#! /usr/bin/env python3

import numpy as np

import figplot.pyplot as plt

plt.figure(figsize=('4.5in', '4.5in'))
plt.scatter(np.random.rand(1000), np.random.rand(1000), s=3)
plt.title('Uniform Random Points')
plt.savefig('demo1.pdf')
