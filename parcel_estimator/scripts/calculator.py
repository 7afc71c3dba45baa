"""
Parcel Shipping Cost Calculator
===============================

Interactive CLI tool to estimate the shipping cost of a single package.

Usage:
    python -m parcel_estimator.scripts.calculator
"""

from parcel_estimator.calculate_costs import estimate
from parcel_estimator.errors import PackageInputError
from parcel_estimator.models import Category, City, CostBreakdown, PackageInput
from parcel_estimator.validation import parse_package
from parcel_estimator.version import VERSION


DEFAULT_ORIGIN = City.JAKARTA
DEFAULT_DESTINATION = City.BANDUNG
DEFAULT_CATEGORY = Category.DOCUMENTS


def format_rupiah(amount: int) -> str:
    """Format a whole-Rupiah amount with dot thousands separators (Rp 28.860)."""
    return "Rp " + f"{amount:,}".replace(",", ".")


def choose(prompt: str, options: list, default, labels: dict | None = None):
    """Prompt for one of options by number or value; empty input keeps default."""
    labels = labels or {}
    print(f"\n{prompt}:")
    for i, option in enumerate(options, start=1):
        marker = " (default)" if option == default else ""
        print(f"  {i:>2}. {labels.get(option, option)}{marker}")

    while True:
        answer = input("Choice: ").strip()
        if not answer:
            return default
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        for option in options:
            if answer.lower() == str(option).lower():
                return option
        print(f"Unknown choice '{answer}', try again.")


def get_user_input() -> PackageInput:
    """Prompt for package details until they validate."""
    print("\n=== Parcel Shipping Cost Calculator ===")
    print(f"Version: {VERSION}")

    while True:
        weight = input("\nPackage weight (kg): ")
        length = input("Length (cm): ")
        width = input("Width (cm): ")
        height = input("Height (cm): ")

        origin = choose("From", list(City), DEFAULT_ORIGIN)
        destination = choose("To", list(City), DEFAULT_DESTINATION)
        category = choose(
            "Package type",
            list(Category),
            DEFAULT_CATEGORY,
            labels={c: c.label for c in Category},
        )
        insured = input("\nAdd insurance? (y/N): ").strip().lower() in ("y", "yes")

        try:
            return parse_package(
                weight, length, width, height,
                origin=origin,
                destination=destination,
                category=category,
                insured=insured,
            )
        except PackageInputError as e:
            print(f"\nError: {e}")


def format_breakdown(breakdown: CostBreakdown) -> list[str]:
    """Result lines, with zero surcharge and insurance lines hidden."""
    lines = [f"{'Shipping Weight:':<20}{breakdown.shipping_weight_kg:>14.2f} kg"]
    for label, amount in breakdown.line_items():
        if label == "Total Cost":
            lines.append(f"{'':<20}{'=' * 14}")
        lines.append(f"{label + ':':<20}{format_rupiah(amount):>14}")
    return lines


def print_results(package: PackageInput, breakdown: CostBreakdown) -> None:
    """Print calculation results."""
    print("\n" + "=" * 50)
    print("COST ESTIMATE")
    print("=" * 50)

    print(f"\nPackage: {package.length_cm:g}x{package.width_cm:g}x{package.height_cm:g} cm, "
          f"{package.weight_kg:g} kg, {package.category.label}")
    print(f"Route: {package.origin} -> {package.destination}")
    print(f"Insured: {'yes' if package.insured else 'no'}\n")

    for line in format_breakdown(breakdown):
        print(line)
    print()


def main():
    """Main entry point."""
    try:
        while True:
            package = get_user_input()
            print_results(package, estimate(package))

            again = input("Calculate again? (y/N): ").strip().lower()
            if again not in ("y", "yes"):
                break

    except (KeyboardInterrupt, EOFError):
        print("\n\nCancelled.")


if __name__ == "__main__":
    main()
