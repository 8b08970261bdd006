"""
Package Express Shipping Cost Calculator
========================================

Interactive CLI tool that quotes the shipping cost of a single package.

Usage:
    python -m package_express.scripts.calculator
"""

from package_express.application import ShippingApplication
from package_express.calculate_costs import ShippingCalculator
from package_express.data import messages
from package_express.gateway import ConsoleGateway
from package_express.validator import PackageValidator


def main():
    """Main entry point."""
    try:
        app = ShippingApplication(ConsoleGateway(), PackageValidator(), ShippingCalculator())
        app.run()

    except (KeyboardInterrupt, EOFError):
        print(f"\n\n{messages.CANCELLED}")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
