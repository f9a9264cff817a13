"""Library variant with a shared borrower queue ordered by category and an activity stack."""