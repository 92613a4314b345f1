"""Fare, price and counting exercises."""