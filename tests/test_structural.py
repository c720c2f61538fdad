import random

import pytest

from structural.adapter import Currency, DollarAdapter, LegacyPaymentSystem, Person, RubleAdapter, Service
from structural.composite import Department, Worker
from structural.decorator import DiscountDecorator, DollarDecorator, EuroPriceList, RubleDecorator
from structural.facade import Airplane, AirplaneStorage, Customer, Direction, Ticket, TicketFacade
from structural.flyweight import ObjectDraftFactory, ObjectDraftType, populate


def test_adapters_convert_legacy_prices():
    legacy = LegacyPaymentSystem()
    assert legacy.pay_for_service(Service.HAIRCUT) == 10
    assert DollarAdapter(legacy).pay_for_service(Service.HAIRCUT) == pytest.approx(11.0)
    assert RubleAdapter(legacy).pay_for_service(Service.MASSAGE) == pytest.approx(1040.0)


def test_person_uses_preferred_currency():
    assert Person(Currency.DOLLARS).use_service(Service.HAIRCUT) == "Person paid 11.0 Dollars for the haircut"
    assert Person(Currency.RUBLES).use_service(Service.MASSAGE) == "Person paid 1040.0 Rubles for the massage"


def test_decorators_stack():
    euros = EuroPriceList()
    assert DollarDecorator(euros).pay_for_service(Service.HAIRCUT) == pytest.approx(11.0)
    assert RubleDecorator(euros).pay_for_service(Service.HAIRCUT) == pytest.approx(650.0)
    discounted = DiscountDecorator(DollarDecorator(euros), percent=50)
    assert discounted.pay_for_service(Service.MASSAGE) == pytest.approx(8.8)


def test_discount_must_be_a_percentage():
    with pytest.raises(ValueError):
        DiscountDecorator(EuroPriceList(), percent=120)


def test_department_rejects_duplicate_names():
    department = Department("Security Department")
    assert department.add_component(Worker("John Worker"))
    assert not department.add_component(Worker("John Worker"))
    assert department.remove_component(Worker("John Worker"))
    assert not department.remove_component(Worker("John Worker"))


def test_nested_departments():
    security = Department("Security Department", [Worker("John Worker")])
    armed = Department("Gun Security Department", [Worker("Mary Worker")])
    security.add_component(armed)

    assert security.description() == [
        "Department name: Security Department",
        "John Worker",
        "Gun Security Department",
    ]
    assert [worker.name for worker in security.workers()] == ["John Worker", "Mary Worker"]


def test_facade_sells_until_full():
    storage = AirplaneStorage([Airplane(seats=2, id=Direction.LA, cost=150)])
    facade = TicketFacade(storage)

    first = facade.buy_ticket(Direction.LA, Customer("Alex", 0))
    second = facade.buy_ticket(Direction.LA, Customer("Kate", 1))
    third = facade.buy_ticket(Direction.LA, Customer("Bob", 2))

    assert (first.seat, second.seat) == (0, 1)
    assert third is None
    assert str(first) == "seat number 0 belongs to customer Alex with id 0"


def test_facade_without_airplane():
    facade = TicketFacade(AirplaneStorage([Airplane(seats=1, id=Direction.LA, cost=1)]))
    assert facade.buy_ticket(Direction.NYC, Customer("Alex", 0)) is None


def test_airplane_drops_overbooked_tickets():
    customer = Customer("Alex", 0)
    tickets = [Ticket(customer, 0), Ticket(customer, 1)]
    assert Airplane(seats=1, id=0, cost=1, tickets=tickets).tickets == []


def test_flyweight_shares_drafts():
    factory = ObjectDraftFactory()
    first = factory.create_object_draft(ObjectDraftType.TYPE_ONE)
    second = factory.create_object_draft(ObjectDraftType.TYPE_ONE)

    assert first is second
    assert first.color == "black"
    assert factory.draft_count == 1


def test_populate_creates_at_most_one_draft_per_type():
    factory = ObjectDraftFactory()
    objects = populate(factory, 200, random.Random(0))

    assert len(objects) == 200
    assert factory.draft_count <= len(ObjectDraftType)
    assert len({id(scene_object.draft) for scene_object in objects}) == factory.draft_count
