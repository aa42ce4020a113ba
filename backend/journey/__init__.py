"""
SAL Journey progress engine.

Turns the raw records of the five tracked domains (journal, reading,
tasks, vocabulary, life arenas) into a single progress snapshot, and
schedules vocabulary reviews.
"""
