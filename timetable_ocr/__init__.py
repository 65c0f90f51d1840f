"""Timetable OCR - PDF расписания автобусов ZPGSA -> структурированные отправления."""
