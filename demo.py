#!/usr/bin/env python3
"""
Surreal Numbers Demo

Walks through the package:
1. Building numbers from left and right sets
2. The recursive order relation
3. Addition, negation and multiplication
4. The float bridge
5. Numbers by birthday
6. Transfinite values (ω, ε) and their truncation
"""

import sys
sys.path.insert(0, '.')

from surreal.logging import get_logger

logger = get_logger("surreal.demo")

print("""
╔══════════════════════════════════════════════════════════════════════════════╗
║                                                                              ║
║                    S U R R E A L   N U M B E R S                             ║
║                                                                              ║
║           { L | R } : every number from the ones before it                 ║
║                                                                              ║
╚══════════════════════════════════════════════════════════════════════════════╝
""")

# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 1: CONSTRUCTION
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 1: CONSTRUCTION")
print("═" * 80)

from surreal import SurrealContext, WellFormingError, construct

ctx = SurrealContext()
logger.info("Using a fresh context for the demo")

zero = construct([], [], ctx)
one = construct([zero], [], ctx)
neg_one = construct([], [zero], ctx)
half = construct([zero], [one], ctx)

print("""
Every surreal number is a pair of sets {L | R} of earlier numbers, with every
member of L below every member of R. Zero needs nothing: {|}.
""")

for name, x in [("0", zero), ("1", one), ("-1", neg_one), ("1/2", half)]:
    print(f"  {name:5} = {str(x):12} depth {x.depth}  ->  {x.to_double()}")

print("\n  Ill-formed sets are rejected:")
try:
    construct([one], [zero], ctx)
except WellFormingError as error:
    print(f"  {{1 | 0}}: {error}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 2: ORDER
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 2: ORDER")
print("═" * 80)

other_zero = construct([neg_one], [one], ctx)

comparisons = [
    (neg_one < zero, "-1 < 0"),
    (zero < half < one, "0 < 1/2 < 1"),
    (other_zero == zero, "{-1 | 1} == {|}"),
    (other_zero.key != zero.key, "{-1 | 1} and {|} are different structures"),
]
for holds, desc in comparisons:
    result = "✓" if holds else "✗"
    print(f"  {result} {desc}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 3: ARITHMETIC
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 3: ARITHMETIC")
print("═" * 80)

two = one + one
identities = [
    (one + (-one) == zero, "1 + (-1) = 0"),
    (two.to_double() == 2.0, "1 + 1 = 2"),
    (one * one == one, "1 · 1 = 1"),
    (neg_one * neg_one == one, "(-1) · (-1) = 1"),
    (half * two == one, "1/2 · 2 = 1"),
    (half + half == one, "1/2 + 1/2 = 1"),
]
for holds, desc in identities:
    result = "✓" if holds else "✗"
    print(f"  {result} {desc}")

print("\n  Memo table sizes after these computations:")
for table, size in ctx.stats().items():
    print(f"  {table:12} {size}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 4: FLOAT BRIDGE
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 4: FLOAT BRIDGE")
print("═" * 80)

from surreal import div_approx, from_double

for value in [2.0, -0.5, 0.375, 3.25]:
    x = from_double(value, ctx)
    print(f"  from_double({value:6}) = {str(x):22} back to {x.to_double()}")

three = from_double(3.0, ctx)
four = from_double(4.0, ctx)
print(f"\n  div_approx(3, 4) = {div_approx(three, four).to_double()}")
print(f"  3 % 2 = {(three % two).to_double()}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 5: BIRTHDAYS
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 5: NUMBERS BY BIRTHDAY")
print("═" * 80)

from surreal import generation, projections

for day in range(1, 5):
    print(f"  Day {day}: {projections(generation(day, ctx))}")


# ═══════════════════════════════════════════════════════════════════════════════
# SECTION 6: TRANSFINITE VALUES
# ═══════════════════════════════════════════════════════════════════════════════

print("\n" + "═" * 80)
print("  SECTION 6: TRANSFINITE VALUES")
print("═" * 80)

from surreal import epsilon, omega

print(f"  ω      = {omega(ctx)}")
print(f"  ϵ      = {epsilon(ctx)}")
print(f"  -ω     = {-omega(ctx)}")
print(f"  2 - 1  = {two.to_infinite() - one.to_infinite()}")

print("\n  Truncations to finite numbers:")
for terms in [3, 6, 10]:
    w = omega(ctx).to_finite(terms)
    e = epsilon(ctx).to_finite(terms)
    print(f"  {terms:3} terms: ω -> {w.to_double():6}   ϵ -> {e.to_double()}")

print("\n" + "═" * 80)
print("  DEMO COMPLETE")
print("═" * 80 + "\n")
