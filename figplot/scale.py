# scale.py - code to generate axis ticks and labels
# Copyright (C) 2019 Jochen Voss <voss@seehuhn.de>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

import itertools
import math


_FUDGE = 1e-6
_MAX_CANDIDATES = 200


class Linear:

    def ticks_for_length(self, a, b, dev_length, dev_opt_dist):
        """Choose ticks inside [a, b] for an axis `dev_length` device
        units long.

        The first (i.e. coarsest) set of ticks with a spacing of at
        most `dev_opt_dist` device units is used.

        Returns:
            A pair ``(ticks, labels)``.

        """
        if not a < b:
            raise ValueError(f"invalid interval [{a}, {b}]")
        q = dev_length / (b - a)
        best = None
        candidates = self.ticks_for_interval(a, b, allow_outside=False)
        for _, ticks, labels in itertools.islice(candidates, _MAX_CANDIDATES):
            best = (ticks, labels)
            if len(ticks) >= 2 and (ticks[1] - ticks[0]) * q <= dev_opt_dist:
                break
        return best

    def ticks_for_interval(self, a, b, *, allow_outside=True):
        """Generate lists of ticks for the interval [a,b]."""

        step = self._smallest_scale_larger_than(b - a)
        # At step size `step`, at most one tick can be inside the
        # range.

        while True:
            dx = self._scale_length(step)
            ia = math.floor(a / dx)
            ib = math.ceil(b / dx)
            # Initially, there are two ticks outside (a, b).

            eps = dx * _FUDGE
            for _ in range(3):
                if ib+1 - ia < 2:
                    break
                all_inside = ia*dx + eps >= a and ib*dx - eps <= b
                if allow_outside or all_inside:
                    lim = (min(ia * dx, a), max(ib * dx, b))
                    ticks = [i * dx for i in range(ia, ib+1)]
                    labels = self._labels(ticks)
                    yield lim, ticks, labels

                if all_inside:
                    break

                # remove the tick which is furthest out
                if a - ia * dx > ib * dx - b:
                    ia += 1
                else:
                    ib -= 1

            step -= 1

    def _labels(self, ticks):
        # use more digits until neighbouring ticks get distinct labels
        for digits in range(6, 18):
            ll = ["%.*g" % (digits, x) for x in ticks]
            if len(set(ll)) == len(ll):
                break
        if all("e" not in l for l in ll) and any("." in l for l in ll):
            parts = []
            for l in ll:
                s = l.split(".")
                if len(s) < 2:
                    s = (s[0], '0')
                parts.append(s)
            max_digits = max(len(b) for _, b in parts)
            ll = []
            for a, b in parts:
                b = b.ljust(max_digits, '0')
                ll.append(a + '.' + b)
        return ll

    @staticmethod
    def _scale_length(k):
        """Get the scale length k.

        Scale lengths are indexed by integers k, and are ..., 0.1, 0.2,
        0.25, 0.5, 1.0, 2.0, 2.5, 5.0, 10.0, ..., where k=0 corresponds to
        the scale length 1.0 and larger values of k correspond to larger
        scale lengths.

        """
        c = [1.0, 2.0, 2.5, 5.0][k % 4]
        return c * 10**(k//4)

    @staticmethod
    def _smallest_scale_larger_than(x):
        """Get the smallest scale with scale length >=x.  This corresponds to
        rounding up to the nearest scale length.

        """
        q = 10**0.25 / 2
        k = math.floor(math.log10(q * x) * 4) + 1
        if Linear._scale_length(k) <= x:
            k += 1
        return k
