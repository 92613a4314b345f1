"""Threaded pieces for batching lines and POSTing them, and a live log viewer server."""