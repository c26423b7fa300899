"""Character, string, memory, number, list, line-reading and output helpers."""