"""Demo of several components contributing to one composite filter."""

import json
from datetime import date

from filter_dsl import CompositeFilter, QueryConfig, and_, component, field, value, values


def main():
    query = CompositeFilter(QueryConfig(page_size=25, sort_fields=["!created"]))
    query.subscribe(lambda config: print(f"Query changed: {config.condition}"))

    # Two independent widgets set their filters
    query.update("ageFilter", field("age").gte(value("Int", 18)))
    query.update("statusFilter", field("status").in_(values("String", "open", "pending")))

    # Setting the same filter again is a no-op, no listener call
    changed = query.update("ageFilter", field("age").gte(value("Int", 18)))
    print(f"Repeated update changed query: {changed}")

    # A widget made up of empty nested slots joins without constraining anything
    query.update("advanced", and_(component(None, None), component(None, None)))

    # A date range widget replaces its own slot and keeps its position
    query.update("ageFilter", field("birthday").lt(value("Date", date(2006, 1, 1))))

    print(json.dumps(query.to_wire(), indent=4))


if __name__ == "__main__":
    main()
