"""Worked Python solutions to the course topics."""