from __future__ import annotations

LINEAR_TEXT = "A B C D E F G A B C H I J K L M"

LYRICS = """
Everything, everything, everything, everything..
In its right place
In its right place
In its right place
Right place

Yesterday I woke up sucking a lemon
Yesterday I woke up sucking a lemon
Yesterday I woke up sucking a lemon
Yesterday I woke up sucking a lemon

Everything, everything, everything..
In its right place
In its right place
Right place

There are two colours in my head
There are two colours in my head
What is that you tried to say?
What was that you tried to say?
Tried to say.. tried to say..
Tried to say.. tried to say..

Everything in its right place 
"""
