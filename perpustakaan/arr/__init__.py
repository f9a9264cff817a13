"""Library variant with a fixed-size book catalogue and a borrower queue per book."""