"""Shortest-route algorithms: tie-aware SPF and predecessor path enumeration."""
