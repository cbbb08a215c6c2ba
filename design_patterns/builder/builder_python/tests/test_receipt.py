import pytest

from pizza_builder import PizzaBuilder, PriceList, ReceiptBuilder, ValidationError


def configure(builder):
    return builder.reset() \
        .set_size("Medium") \
        .set_crust("Thin") \
        .add_cheese() \
        .add_topping("Basil")


class TestReceiptBuilder:

    def test_renders_receipt(self):
        receipt = configure(ReceiptBuilder()).build()

        assert receipt == "\n".join([
            "===== Pizza Receipt =====",
            "Size: Medium",
            "Crust: Thin",
            "Cheese: Yes",
            "Toppings:",
            "  - Basil",
            "Extras: None",
            "=========================",
        ])

    def test_no_cheese_no_toppings_and_several_extras(self):
        receipt = ReceiptBuilder().set_size("Small").set_crust("Pan") \
            .add_extra("Dip").add_extra("Napkins").build()

        lines = receipt.splitlines()
        assert "Cheese: No" in lines
        assert "Toppings: None" in lines
        assert lines[lines.index("Extras:") + 1:lines.index("Extras:") + 3] == ["  - Dip", "  - Napkins"]

    def test_validation_matches_pizza_builder(self):
        with pytest.raises(ValidationError) as exc_info:
            ReceiptBuilder().set_crust("Thin").build()

        assert exc_info.value.missing == ("size",)

    def test_failed_build_keeps_configuration_for_retry(self):
        builder = ReceiptBuilder().set_crust("Thin").add_topping("Basil")

        with pytest.raises(ValidationError):
            builder.build()

        receipt = builder.set_size("Medium").build()
        assert "Size: Medium" in receipt
        assert "Crust: Thin" in receipt
        assert "  - Basil" in receipt

    def test_resets_after_render(self):
        builder = ReceiptBuilder()
        configure(builder).build()

        with pytest.raises(ValidationError):
            builder.build()

    def test_total_line_with_price_list(self):
        receipt = configure(ReceiptBuilder(PriceList())).build()

        lines = receipt.splitlines()
        # Medium 1.5 + cheese 1.0 + one topping 1.0
        assert lines[-2] == "Total: 3.50"
        assert lines[-1] == "========================="


class TestRepresentationIndependence:

    def test_same_calls_give_consistent_pizza_and_receipt(self):
        pizza = configure(PizzaBuilder()).add_extra("Dip").build()
        receipt = configure(ReceiptBuilder()).add_extra("Dip").build()

        assert "Size: %s" % pizza.size in receipt
        assert "Crust: %s" % pizza.crust in receipt
        assert "Cheese: Yes" in receipt
        for item in pizza.toppings + pizza.extras:
            assert "  - %s" % item in receipt
