"""HTTP methods, requests, responses with cache hints, and batching data loaders."""