"""Worked solutions to a selection of the exercises, grouped by topic."""