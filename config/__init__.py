"""Конфигурация проекта Timetable OCR."""
