"""One module per puzzle day, each with part1 and part2, and a registry of them."""