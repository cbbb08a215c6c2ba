import logging

from pizza_builder import Director, PizzaBuilder, PizzaType, PriceList, ReceiptBuilder


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    price_list = PriceList()
    director = Director(price_list)
    pizza_builder = PizzaBuilder()
    receipt_builder = ReceiptBuilder(price_list)

    for pizza_type in PizzaType:
        pizza = director.construct(pizza_type, pizza_builder)
        receipt = director.construct(pizza_type, receipt_builder)
        print("Price is %s for %s" % (director.quote(pizza_type), pizza))
        print(receipt)

    # The same builder can be driven by hand as well
    custom_pizza = pizza_builder.reset() \
        .set_size("Large") \
        .set_crust("Deep Dish") \
        .add_topping("Pepperoni") \
        .add_topping("Sausage") \
        .build()
    print("Price is %s for %s" % (price_list.price(custom_pizza), custom_pizza))


if __name__ == '__main__':
    main()
