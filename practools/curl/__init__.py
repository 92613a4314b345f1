"""A minimal HTTP client that reports its request and response."""