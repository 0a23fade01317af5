"""
MediLink: healthcare appointment booking backend

Storage-agnostic domain model for admins, doctors, patients, hospitals,
appointments and ratings, served over a small CRUD API and persisted in
either a relational database or a MongoDB document store.
"""

__version__ = "0.1.0"
__author__ = "MediLink Team"
__description__ = "Healthcare appointment booking backend"
