"""Bounded single-producer, single-consumer queue."""