"""LINE webhook bot for wedding RSVPs and blessings."""
