"""
結構型設計模式：適配器、裝飾器、組合、外觀與享元。
"""

from structural.adapter import Person, DollarAdapter, RubleAdapter
from structural.composite import Department, Worker
from structural.facade import TicketFacade
from structural.flyweight import ObjectDraftFactory
