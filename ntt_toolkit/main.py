"""
NTT Toolkit - Main Entry Point

This script provides a menu over the toolkit's demos:
    1. Number theory - gcd, inverses, exponentiation and their sign rules
    2. Radix-2 NTT - the p = 433, w = 354 example, checked against evaluation
    3. Radix-3 NTT - the p = 433, w = 150 example
    4. Polynomial multiplication via the NTT

Run with:
    python -m ntt_toolkit.main
"""

from .common.field import PrimeField
from .common.numtheory import extended_gcd, mod_inverse, mod_pow, normalize
from .common.polynomial import evaluate_polynomial, multiply_naive, naive_transform
from .transform.core import multiply_polynomials
from .transform.params import (
    create_ntt_friendly_params,
    create_radix2_demo_params,
    create_radix3_demo_params,
)


def print_banner():
    """Print the toolkit banner."""
    print()
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + " " * 26 + "NTT TOOLKIT" + " " * 31 + "║")
    print("║" + " " * 68 + "║")
    print("║" + " " * 11 + "Exact Number-Theoretic Transforms over Z/pZ" + " " * 14 + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")
    print()


def print_menu():
    """Print the main menu."""
    print("  [1] Number theory (gcd, inverse, pow)")
    print("  [2] Radix-2 NTT")
    print("  [3] Radix-3 NTT")
    print("  [4] Polynomial multiplication")
    print("  [5] Quick demo (all of the above)")
    print()
    print("  [q] Quit")
    print()


def run_numtheory():
    """Show the scalar routines and their sign conventions."""
    print("\n" + "=" * 70)
    print("NUMBER THEORY")
    print("=" * 70)

    print(f"\nextended_gcd(12, 16) = {extended_gcd(12, 16)}   (12*-1 + 16*1 = 4)")
    print(f"mod_inverse(3, 7)    = {mod_inverse(3, 7)}")

    print(f"\n{'x':>4} {'e':>4} {'mod_pow(x, e, 17)':>20} {'normalized':>12}")
    print("-" * 44)
    for x, e in [(2, 0), (2, 3), (2, 6), (-3, 1), (-3, 15)]:
        r = mod_pow(x, e, 17)
        print(f"{x:>4} {e:>4} {r:>20} {normalize(r, 17):>12}")

    print("\nNote: mod_pow keeps the sign of the base; mod_inverse is canonical.")


def _show_transform(params, coeffs):
    points = params.forward(coeffs)
    oracle = naive_transform(coeffs, params.omega, params.prime)
    recovered = params.inverse(points)

    print(f"\n{params.summary()}")
    print(f"\nCoefficients:      {coeffs}")
    print(f"Point values:      {points}")
    print(f"  normalized:      {normalize(points, params.prime)}")
    print(f"Direct evaluation: {normalize(oracle, params.prime)}")
    print(f"Inverse:           {recovered}")
    print(f"  normalized:      {normalize(recovered, params.prime)}")

    agrees = normalize(points, params.prime) == normalize(oracle, params.prime)
    round_trip = normalize(recovered, params.prime) == normalize(coeffs, params.prime)
    print(f"\n✓ Matches evaluation: {agrees}")
    print(f"✓ Round trip:         {round_trip}")


def run_radix2():
    """Radix-2 example over Z_433."""
    print("\n" + "=" * 70)
    print("RADIX-2 NTT")
    print("=" * 70)
    _show_transform(create_radix2_demo_params(), [1, 2, 3, 4, 5, 6, 7, 8])


def run_radix3():
    """Radix-3 example over Z_433."""
    print("\n" + "=" * 70)
    print("RADIX-3 NTT")
    print("=" * 70)
    _show_transform(create_radix3_demo_params(), [1, 2, 3, 4, 5, 6, 7, 8, 9])


def run_multiplication():
    """Multiply random polynomials with the NTT and compare to schoolbook."""
    print("\n" + "=" * 70)
    print("POLYNOMIAL MULTIPLICATION")
    print("=" * 70)

    params = create_ntt_friendly_params(64)
    field = PrimeField(params.prime)

    print(f"\nField: Z_{field.prime}")
    print(f"\n{'deg a':>6} {'deg b':>6} {'NTT size':>9} {'matches schoolbook':>20}")
    print("-" * 45)
    for len_a, len_b in [(2, 2), (5, 3), (16, 16), (33, 20)]:
        a = field.random_vector(len_a)
        b = field.random_vector(len_b)
        fast = multiply_polynomials(a, b, field.prime)
        slow = multiply_naive(a, b, field.prime)
        print(f"{len_a - 1:>6} {len_b - 1:>6} {len(fast):>9} {str(fast == slow):>20}")

    a, b = [1, 2], [3, 4]
    print(f"\n(1 + 2x)(3 + 4x) mod 433 = {multiply_polynomials(a, b, 433)}")
    print(f"P(x) = 1 + 2x + ... + 6x^5 at x = 5 mod 17: "
          f"{evaluate_polynomial([1, 2, 3, 4, 5, 6], 5, 17)}")


def run_quick_demo():
    """Run every demo in sequence."""
    run_numtheory()
    run_radix2()
    run_radix3()
    run_multiplication()

    print("\n" + "=" * 70)
    print("QUICK DEMO COMPLETE")
    print("=" * 70)


def main():
    """Main entry point."""
    print_banner()

    actions = {
        "1": run_numtheory,
        "2": run_radix2,
        "3": run_radix3,
        "4": run_multiplication,
        "5": run_quick_demo,
    }

    while True:
        print_menu()

        choice = input("Enter your choice: ").strip().lower()

        if choice == "q":
            print("\nGoodbye!")
            break
        if choice in actions:
            actions[choice]()
        else:
            print("\nInvalid choice. Please try again.")

        print()
        input("Press Enter to continue...")
        print("\n" * 2)


if __name__ == "__main__":
    main()
