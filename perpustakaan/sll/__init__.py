"""Library variant with books, members, a priority loan list and a loan history."""