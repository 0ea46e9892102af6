# Exact arithmetic on continued fractions

from fractions import Fraction
import matplotlib.pyplot as plt
from cfarith import ContinuedFraction, E, SQRT2, PHI
from cfarith.utils import plot_convergents

import logging
logging.basicConfig(level=logging.INFO)

x = ContinuedFraction.from_rational(10, 7)
y = ContinuedFraction.from_rational(1, 2)
print(f"{x} + {y} = {x + y} = {(x + y).to_rational()}")
print(f"1/{x} = {x.reciprocal()}")
print(f"{x} * 3/4 = {x * Fraction(3, 4)}")

## Irrational operands
print(f"sqrt(2) + 1 = {SQRT2 + 1}")
print(f"e + sqrt(2) = {E + SQRT2} ~ {float(E + SQRT2)}")
print(f"phi^2 - phi = {PHI * PHI - PHI}")

# sqrt(2)*sqrt(2) can only be decided by the fuse, a warning is logged
print(f"sqrt(2) * sqrt(2) = {SQRT2 * SQRT2}")

## Square roots and their convergents
sqrt19 = ContinuedFraction.sqrt(19)
print(f"sqrt(19) = {sqrt19.format(15)}")
for p, q in sqrt19.convergents(8):
    print(f"  {p}/{q} = {p / q:.12f}")

fig, ax = plot_convergents(sqrt19, nterms=25, label=r"$\sqrt{19}$")
plot_convergents(E, nterms=25, ax=ax, label=r"$e$")
plot_convergents(PHI, nterms=25, ax=ax, label=r"$\varphi$")
ax.legend()
plt.show()
