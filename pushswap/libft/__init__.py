"""Small character, string, memory, output and linked-list helpers."""