"""Character, byte-buffer, string, linked-list and output helpers."""