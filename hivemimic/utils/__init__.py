"""Small helpers for environment access, futures and lists."""