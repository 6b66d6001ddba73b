"""Базовые абстракции: игра, верификатор, данные задачи и утилиты."""
