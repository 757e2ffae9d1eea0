"""Helpers shared by the puzzle solutions: files, graphs, linked lists, ranges, lists."""